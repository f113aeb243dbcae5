"""The list of all playlists shown in the side panel."""

from __future__ import annotations

from typing import Callable, Iterable

from mpz.playlist import Playlist


class PlaylistCollection:
    """Ordered playlists with one highlighted; every change is saved."""

    def __init__(
        self,
        playlists: Iterable[Playlist] = (),
        save: Callable[[list[Playlist]], bool] | None = None,
    ) -> None:
        self.playlists: list[Playlist] = list(playlists)
        self.highlight_uid = 0
        self._save = save

    def __len__(self) -> int:
        return len(self.playlists)

    def append(self, playlist: Playlist) -> int:
        """Add ``playlist`` at the end, save, and return its row."""
        self.playlists.append(playlist)
        self.persist()
        return len(self.playlists) - 1

    def remove(self, row: int) -> None:
        """Remove the playlist at ``row``; rows out of range are ignored."""
        if not 0 <= row < len(self.playlists):
            return
        del self.playlists[row]
        self.persist()

    def item_at(self, row: int) -> Playlist | None:
        if not 0 <= row < len(self.playlists):
            return None
        return self.playlists[row]

    def item_by(self, uid: int) -> Playlist | None:
        return next((p for p in self.playlists if p.uid == uid), None)

    def item_by_track(self, track_uid: int) -> Playlist | None:
        """The first playlist holding the track with ``track_uid``."""
        return next((p for p in self.playlists if p.has_track(track_uid)), None)

    def index_of(self, playlist: Playlist) -> int:
        """Row of the playlist with the same uid, or -1."""
        return next(
            (row for row, p in enumerate(self.playlists) if p.uid == playlist.uid), -1
        )

    def highlight(self, playlist: Playlist | None) -> None:
        """Mark ``playlist`` as the playing one; None clears the mark."""
        self.highlight_uid = 0 if playlist is None else playlist.uid

    def is_highlighted(self, row: int) -> bool:
        item = self.item_at(row)
        return item is not None and item.uid == self.highlight_uid

    def names(self) -> list[str]:
        return [p.name for p in self.playlists]

    def persist(self) -> bool:
        """Save the playlists; True if saved or if there is no store to save to."""
        if self._save is None:
            return True
        return bool(self._save(list(self.playlists)))