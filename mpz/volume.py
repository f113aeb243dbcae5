"""Volume setting shown on the volume button."""

from __future__ import annotations

from typing import Callable

MIN_VOLUME = 0
MAX_VOLUME = 100
WHEEL_STEP = 5


class VolumeControl:
    """Holds the volume in percent and reports requested changes.

    ``on_change`` is called with the new volume whenever the shown value
    changes and with the requested volume when the wheel is turned.
    """

    def __init__(
        self,
        initial_value: int = MAX_VOLUME,
        on_change: Callable[[int], None] | None = None,
    ) -> None:
        self.value = MIN_VOLUME
        self.on_change: Callable[[int], None] | None = None
        self.set_value(initial_value)
        self.on_change = on_change

    @property
    def text(self) -> str:
        return f"{self.value}%"

    @property
    def muted(self) -> bool:
        return self.value == MIN_VOLUME

    def set_value(self, value: int) -> int:
        """Show ``value`` clamped to 0..100 and return it."""
        value = max(MIN_VOLUME, min(value, MAX_VOLUME))
        if value != self.value:
            self.value = value
            if self.on_change is not None:
                self.on_change(value)
        return self.value

    def wheel(self, delta: int) -> int | None:
        """Request a step up or down for a wheel turn; return the requested volume."""
        if delta > 0:
            requested = self.value + WHEEL_STEP
        elif delta < 0:
            requested = self.value - WHEEL_STEP
        else:
            return None
        if self.on_change is not None:
            self.on_change(requested)
        return requested