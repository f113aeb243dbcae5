"""Multi-level sorting of tracks by criteria such as ``Artist / -Year``."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterable

from mpz.track import Track


def default_criteria() -> str:
    return "YEAR / ALBUM / DIRECTORY / TRACKNUMBER / FILENAME / TITLE"


_FIELDS: dict[str, Callable[[Track], object]] = {
    "ARTIST": lambda t: t.artist(),
    "ALBUM": lambda t: t.album,
    "YEAR": lambda t: t.year,
    "TRACKNUMBER": lambda t: t.track_number,
    "FILENAME": lambda t: t.filename(),
    "TITLE": lambda t: t.title(),
    "DIRECTORY": lambda t: t.dir(),
}


class Sorter:
    """Orders tracks by a ``/``-separated list of fields; ``-`` reverses one."""

    def __init__(self, criteria: str | None = None) -> None:
        if criteria is None:
            criteria = default_criteria()
        self.criteria = [" ".join(part.split()).upper() for part in criteria.split("/") if part]

    def compare(self, t1: Track, t2: Track, attr: str) -> int:
        """Return 1 if t1 sorts before t2 on ``attr``, -1 if after, 0 if equal."""
        order = 1
        if attr.startswith("-"):
            attr = attr[1:]
            order = -1
        getter = _FIELDS.get(attr)
        if getter is None:
            return 0
        a, b = getter(t1), getter(t2)
        if a < b:
            result = 1
        elif a > b:
            result = -1
        else:
            result = 0
        return result * order

    def condition(self, t1: Track, t2: Track) -> bool:
        """True if t1 must come before t2."""
        for attr in self.criteria:
            cmp = self.compare(t1, t2, attr)
            if cmp > 0:
                return True
            if cmp < 0:
                return False
        return False

    def _cmp(self, t1: Track, t2: Track) -> int:
        if self.condition(t1, t2):
            return -1
        if self.condition(t2, t1):
            return 1
        return 0

    def sort(self, tracks: Iterable[Track]) -> list[Track]:
        """Return the tracks as a new sorted list."""
        return sorted(tracks, key=cmp_to_key(self._cmp))