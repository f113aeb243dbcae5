"""A named, ordered list of tracks built from files, directories and playlists."""

from __future__ import annotations

import os
import threading
from enum import IntEnum
from typing import Callable, Iterable

from mpz.loader import Loader
from mpz.rng import generate_uid
from mpz.sorter import Sorter
from mpz.track import Track

MAX_NAME_LEN = 69


class PlaylistRandom(IntEnum):
    """How the next track is picked when playback advances."""

    NONE = 0
    RANDOM = 1
    SEQUENTIAL = 2
    SEQUENTIAL_NO_LOOP = 3


def _name_by(path: str | os.PathLike[str]) -> str:
    return os.path.basename(os.path.normpath(os.path.abspath(os.fspath(path))))


class Playlist:
    """Tracks in play order, with a name and a unique id."""

    def __init__(
        self,
        name: str = "",
        tracks: Iterable[Track] = (),
        uid: int | None = None,
    ) -> None:
        self.name = ""
        self.rename(name)
        self.tracks: list[Track] = list(tracks)
        self.uid = generate_uid() if uid is None else uid
        self.random = PlaylistRandom.NONE

    def __repr__(self) -> str:
        return f"Playlist(uid={self.uid}, name={self.name!r}, tracks={len(self.tracks)})"

    def rename(self, value: str) -> str:
        """Set the name, shortening it with "..." if too long; return the new name."""
        if len(value) > MAX_NAME_LEN:
            self.name = value[: MAX_NAME_LEN - 3] + "..."
        else:
            self.name = value
        return self.name

    def load(self, path: str | os.PathLike[str]) -> None:
        """Name the playlist after ``path`` and append its tracks."""
        self.rename(_name_by(path))
        self.concat(path)

    def load_tracks(self, tracks: Iterable[Track]) -> None:
        self.tracks.extend(tracks)

    def load_many(self, dirs: Iterable[str | os.PathLike[str]]) -> None:
        """Append the tracks of every path and name the playlist after all of them."""
        names = []
        for path in dirs:
            self.load(path)
            names.append(_name_by(path))
        self.rename(", ".join(names))

    def load_async(
        self,
        dirs: Iterable[str | os.PathLike[str]],
        callback: Callable[[Playlist], None] | None = None,
    ) -> threading.Thread:
        """Run :meth:`load_many` in a background thread, then call ``callback(self)``."""
        paths = list(dirs)

        def work() -> None:
            self.load_many(paths)
            if callback is not None:
                callback(self)

        thread = threading.Thread(target=work, daemon=True)
        thread.start()
        return thread

    def concat(self, path: str | os.PathLike[str]) -> None:
        """Append the tracks at ``path``; tracks not from a playlist file are sorted."""
        loader = Loader(path)
        tracks = loader.tracks()
        if loader.is_playlist_file():
            self.tracks.extend(tracks)
        else:
            self.tracks.extend(Sorter().sort(tracks))

    def concat_many(self, dirs: Iterable[str | os.PathLike[str]]) -> None:
        for path in dirs:
            self.concat(path)

    def concat_async(
        self,
        dirs: Iterable[str | os.PathLike[str]],
        callback: Callable[[Playlist], None] | None = None,
    ) -> threading.Thread:
        """Run :meth:`concat_many` in a background thread, then call ``callback(self)``."""
        paths = list(dirs)

        def work() -> None:
            self.concat_many(paths)
            if callback is not None:
                callback(self)

        thread = threading.Thread(target=work, daemon=True)
        thread.start()
        return thread

    def has_track(self, track_uid: int) -> bool:
        return self.track_index(track_uid) >= 0

    def track_index(self, track_uid: int) -> int:
        """Position of the track with ``track_uid``, or -1."""
        return next((i for i, t in enumerate(self.tracks) if t.uid == track_uid), -1)

    def track_by(self, uid: int) -> Track:
        """The track with ``uid``, or an empty invalid track."""
        return next((t for t in self.tracks if t.uid == uid), None) or Track.empty()

    def remove_track(self, position: int) -> None:
        del self.tracks[position]

    def sort_by(self, criteria: str) -> None:
        self.tracks = Sorter(criteria).sort(self.tracks)

    def to_m3u(self) -> bytes:
        """Encode the playlist as UTF-8 M3U: one path or stream URL per line."""
        lines = [t.url() if t.is_stream() else t.path for t in self.tracks]
        return "\n".join(lines).encode("utf-8")

    def reload(self) -> None:
        """Re-read audio properties and tags of every track."""
        for track in self.tracks:
            track.reload()