"""Table view of the tracks of the current playlist."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from mpz.columns import Alignment, ColumnsConfig
from mpz.playlist import Playlist
from mpz.track import Track


class HighlightState(Enum):
    """How the highlighted track is marked in the table."""

    NONE = 0
    PLAYING = 1
    PAUSED = 2


class PlaylistView:
    """Rows of a playlist's tracks; column 0 holds the play state, the rest are configured."""

    def __init__(self, columns: ColumnsConfig | None = None) -> None:
        self.columns = columns if columns is not None else ColumnsConfig()
        self.playlist: Playlist | None = None
        self.tracks: list[Track] = []
        self.highlight_uid = 0
        self.highlight_state = HighlightState.NONE

    def row_count(self) -> int:
        return len(self.tracks)

    def column_count(self) -> int:
        return self.columns.count() + 1

    def set_playlist(self, playlist: Playlist | None) -> None:
        """Show ``playlist``, or nothing when it is None."""
        self.playlist = playlist
        self.reload()

    def reload(self) -> None:
        """Take a fresh copy of the playlist's tracks."""
        self.tracks = [] if self.playlist is None else list(self.playlist.tracks)

    def item_at(self, row: int) -> Track:
        if not 0 <= row < len(self.tracks):
            raise IndexError(f"row {row} out of range")
        return self.tracks[row]

    def highlight(self, uid: int, state: HighlightState) -> None:
        """Mark the track with ``uid``; uid 0 highlights nothing."""
        self.highlight_uid = uid
        self.highlight_state = state

    def index_of(self, uid: int) -> int:
        """Row of the track with ``uid``, or -1."""
        return next((row for row, t in enumerate(self.tracks) if t.uid == uid), -1)

    def remove(self, rows: Iterable[int]) -> None:
        """Remove the tracks at ``rows`` from the playlist and refresh."""
        if self.playlist is None:
            raise ValueError("no playlist loaded")
        for row in sorted(rows, reverse=True):
            self.playlist.remove_track(row)
        self.reload()

    def cell(self, row: int, col: int) -> str:
        """Displayed text; column 0 carries only an icon and has no text."""
        track = self.item_at(row)
        if col == 0:
            return ""
        return self.columns.value(col, track)

    def alignment(self, col: int) -> Alignment:
        if col == 0:
            return Alignment.LEFT
        return self.columns.column(col).align

    def icon(self, row: int) -> HighlightState:
        """State icon shown in column 0 of ``row``."""
        track = self.item_at(row)
        if track.uid == self.highlight_uid and self.highlight_state in (
            HighlightState.PLAYING,
            HighlightState.PAUSED,
        ):
            return self.highlight_state
        return HighlightState.NONE

    def is_bold(self, row: int) -> bool:
        return self.item_at(row).uid == self.highlight_uid