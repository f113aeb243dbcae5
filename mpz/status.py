"""Text of the status bar describing what is playing."""

from __future__ import annotations

from mpz.track import Track

STOPPED = "Stopped"
PLAYING = "Playing"
PAUSED = "Paused"

_UNITS = ("KB", "MB", "GB", "TB")


def humanized_bytes(count: int) -> str:
    """Render a byte count with the largest unit it reaches, rounding down."""
    unit = "bytes"
    for next_unit in _UNITS:
        if count < 1024:
            break
        unit = next_unit
        count //= 1024
    return f"{count} {unit}"


class StatusText:
    """Tracks the player state and the status line shown for it."""

    def __init__(self) -> None:
        self.state = STOPPED
        self.stream_buffer = 0
        self.text = ""
        self.stopped()

    def _track_info(self, track: Track) -> str:
        info = f": {track.short_text()} | {track.formatted_audio_info()}"
        if self.stream_buffer > 0:
            info += f" | stream buffer {humanized_bytes(self.stream_buffer)}"
        return info

    def stopped(self) -> str:
        self.state = STOPPED
        self.stream_buffer = 0
        self.text = self.state
        return self.text

    def started(self, track: Track) -> str:
        self.state = PLAYING
        self.stream_buffer = 0
        self.text = self.state + self._track_info(track)
        return self.text

    def paused(self, track: Track) -> str:
        self.state = PAUSED
        self.text = self.state + self._track_info(track)
        return self.text

    def stream_buffer_fill(self, track: Track, nbytes: int) -> str:
        self.stream_buffer = nbytes
        if self.state != STOPPED:
            self.text = self.state + self._track_info(track)
        return self.text

    def progress(self, track: Track, current_seconds: int) -> str:
        self.text = self.state + self._track_info(track)
        return self.text

    def track_title(self) -> str:
        """The track part of the status line, without state and audio info."""
        return self.text.split("|")[0].replace(self.state + ": ", "")