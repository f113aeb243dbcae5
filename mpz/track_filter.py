"""Search filter for the playlist table."""

from __future__ import annotations

from typing import Sequence

from mpz.track import Track


def matches(track: Track, term: str) -> bool:
    """True if ``term`` occurs, ignoring case, in artist, album, file name or title."""
    needle = term.casefold()
    return any(
        needle in text.casefold()
        for text in (track.artist(), track.album, track.filename(), track.title())
    )


def filter_rows(tracks: Sequence[Track], term: str) -> list[int]:
    """Rows of ``tracks`` that match ``term``, in order."""
    return [row for row, track in enumerate(tracks) if matches(track, term)]