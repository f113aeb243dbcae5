"""Collects tracks from a file, a playlist file or a directory tree."""

from __future__ import annotations

import os
from typing import Iterator

from mpz.cueparser import CueParser
from mpz.fileparser import FileParser
from mpz.formats import is_supported_file, supported_file_formats, supported_playlist_file_formats
from mpz.track import Track


class Loader:
    """Loads the tracks found at a path."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.path.abspath(os.fspath(path))

    def _name(self) -> str:
        return os.path.basename(self.path)

    def _is_dir_empty(self) -> bool:
        if not os.path.isdir(self.path):
            return True
        with os.scandir(self.path) as entries:
            return not any(True for _ in entries)

    def is_single_file(self) -> bool:
        """True if the path is a single supported audio file."""
        return self._is_dir_empty() and is_supported_file(self._name())

    def is_playlist_file(self) -> bool:
        """True if the path names an M3U or PLS playlist."""
        name = self._name().lower()
        return any(name.endswith(ext) for ext in supported_playlist_file_formats())

    def _audio_files(self) -> Iterator[str]:
        suffixes = tuple("." + ext for ext in supported_file_formats())
        for root, dirnames, filenames in os.walk(self.path):
            dirnames.sort()
            for name in sorted(filenames):
                if not name.startswith(".") and name.lower().endswith(suffixes):
                    yield os.path.join(root, name)

    def tracks(self) -> list[Track]:
        """Return the tracks; files covered by a CUE sheet appear only as its tracks."""
        if self.is_playlist_file():
            return FileParser(self.path).tracks()
        if self.is_single_file():
            return [Track.from_file(self.path)]

        result: list[Track] = []
        cue_paths: set[str] = set()
        for file_path in self._audio_files():
            if file_path.lower().endswith(".cue"):
                cue_tracks = CueParser(file_path).tracks()
                cue_paths.update(track.path for track in cue_tracks)
                result.extend(cue_tracks)
            else:
                result.append(Track.from_file(file_path))

        if cue_paths:
            result = [t for t in result if t.cue or t.path not in cue_paths]
        return result