"""Reader for M3U and PLS playlist files."""

from __future__ import annotations

import os

from mpz.formats import is_supported_file
from mpz.track import Track


class FileParser:
    """Turns the lines of a playlist file into tracks and streams."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.path.abspath(os.fspath(path))

    def _current_dir(self) -> str:
        return os.path.dirname(self.path)

    def parse_line(self, line: str) -> tuple[str, bool]:
        """Return ``(location, is_stream)``; location is "" if the line names nothing usable."""
        lowered = line.lower()
        if lowered.startswith("http"):
            return line, True
        if lowered.startswith("file"):
            return line[6:], True
        if is_supported_file(line):
            if os.path.isabs(line):
                return (line if os.path.exists(line) else ""), False
            full_path = os.path.join(self._current_dir(), line)
            return (full_path if os.path.exists(full_path) else ""), False
        return "", False

    def tracks(self) -> list[Track]:
        """Read the playlist; raises OSError if it cannot be opened."""
        items: list[Track] = []
        with open(self.path, encoding="utf-8", errors="replace") as fh:
            for raw in fh:
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue
                location, is_stream = self.parse_line(line)
                if not location:
                    continue
                if is_stream:
                    items.append(Track.from_stream(location, self.path))
                else:
                    items.append(Track.from_file(location))
        return items