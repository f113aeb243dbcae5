"""State of the tray icon: enabled actions, tooltip and now-playing line."""

from __future__ import annotations

from dataclasses import dataclass

from mpz.track import Track, formatted_time


def time_text(track: Track, pos: int) -> str:
    """Position and total duration as ``pos/duration``."""
    return f"{formatted_time(pos)}/{track.formatted_duration()}"


@dataclass
class TrayState:
    """What the tray menu shows for the current player state."""

    play_enabled: bool = True
    pause_enabled: bool = True
    stop_enabled: bool = True
    next_enabled: bool = True
    prev_enabled: bool = True
    tooltip: str = "Stopped"
    now_playing: str = ""

    def _set_enabled(self, play: bool, others: bool) -> None:
        self.play_enabled = play
        self.pause_enabled = others
        self.stop_enabled = others
        self.next_enabled = others
        self.prev_enabled = others

    def _update_now_playing(self, track: Track | None, pos: int) -> None:
        if track is None or pos < 0:
            self.now_playing = ""
            return
        self.now_playing = f"{track.short_text()} ({time_text(track, pos)})"

    def started(self, track: Track) -> None:
        self._set_enabled(play=False, others=True)
        self._update_now_playing(track, 0)
        self.tooltip = f"Playing: {track.artist()} - {track.title()}"

    def stopped(self) -> None:
        self._set_enabled(play=True, others=False)
        self._update_now_playing(None, -1)
        self.tooltip = "Stopped"

    def paused(self, track: Track) -> None:
        self._set_enabled(play=True, others=True)
        self.tooltip = f"Paused: {track.artist()} - {track.title()}"

    def progress(self, track: Track, current_seconds: int) -> None:
        self._update_now_playing(track, current_seconds)