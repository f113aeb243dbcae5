"""Parser for CUE sheets that describe tracks inside larger audio files."""

from __future__ import annotations

import codecs
import logging
import os
import re
from dataclasses import dataclass, field

from mpz.track import Track

_LINE = re.compile(r'(\S+)\s+(?:"([^"]+)"|(\S+))\s*(?:"([^"]+)"|(\S+))?')
_INDEX = re.compile(r"(\d{2,3}):(\d{2}):(\d{2})")
_FRAMES_PER_SECOND = 75

_BOMS = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)

_log = logging.getLogger(__name__)


def split_cue_line(line: str) -> list[str]:
    """Split a CUE line into its keyword and up to two values, unquoting them.

    Returns an empty list for lines that do not have that shape.
    """
    match = _LINE.fullmatch(line.strip())
    if match is None:
        return []
    return ["" if group == '""' else group for group in match.groups() if group]


def begin_by_index(index: str) -> int:
    """Convert an ``MM:SS:FF`` index (75 frames a second) to milliseconds, or -1."""
    match = _INDEX.fullmatch(index)
    if match is None:
        return -1
    minutes, seconds, frames = (int(part) for part in match.groups())
    total_frames = (minutes * 60 + seconds) * _FRAMES_PER_SECOND + frames
    return total_frames * 1000 // _FRAMES_PER_SECOND


def _decode(data: bytes) -> str:
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return data.decode(encoding, errors="replace")
    return data.decode("utf-8", errors="replace")


def _to_uint16(text: str) -> int:
    text = text.strip()
    if not text.isascii() or not text.isdigit():
        return 0
    value = int(text)
    if value > 0xFFFFFFFF:
        return 0
    return value & 0xFFFF


@dataclass
class CueEntry:
    """A single TRACK entry of a CUE sheet."""

    file: str = ""
    index: str = ""
    title: str = ""
    artist: str = ""
    album_artist: str = ""
    album: str = ""
    composer: str = ""
    album_composer: str = ""
    genre: str = ""
    date: str = ""
    disc: str = ""


@dataclass
class _AlbumState:
    artist: str = ""
    title: str = ""
    composer: str = ""
    file: str = ""
    file_type: str = ""
    genre: str = ""
    date: str = ""
    disc: str = ""


@dataclass
class _Lines:
    lines: list[str]
    position: int = field(default=0)

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.lines)

    def read(self) -> str | None:
        if self.at_end:
            return None
        line = self.lines[self.position]
        self.position += 1
        return line


class CueParser:
    """Reads the tracks described by a CUE sheet on disk."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)

    def entries(self) -> list[CueEntry]:
        """Parse the sheet into raw entries; raises OSError if it cannot be read."""
        with open(self.path, "rb") as fh:
            data = fh.read()
        reader = _Lines(_decode(data).splitlines())
        dir_path = os.path.dirname(os.path.abspath(self.path))
        album = _AlbumState()
        entries: list[CueEntry] = []

        line = reader.read()
        while not reader.at_end:
            line = self._parse_header(reader, line, album, dir_path)
            if line is None:
                _log.warning("the .cue file from %s defines no tracks", dir_path)
            line = self._parse_tracks(reader, line, album, entries)
        return entries

    def tracks(self) -> list[Track]:
        """Build tracks for the sheet with begin offsets and durations in ms."""
        entries = self.entries()
        result: list[Track] = []
        for number, entry in enumerate(entries, start=1):
            begin = begin_by_index(entry.index)
            track = Track(
                entry.file,
                begin,
                artist=entry.artist or entry.album_artist,
                album=entry.album,
                title=entry.title,
                track_number=number & 0xFFFF,
                year=_to_uint16(entry.date),
                cue=True,
            )
            track.fill_audio_properties()
            duration = -1
            if number < len(entries):
                duration = begin_by_index(entries[number].index) - begin
            if duration < 0:
                duration = track.duration - begin
            track.duration = max(duration, 0)
            result.append(track)
        return result

    @staticmethod
    def _parse_header(
        reader: _Lines, line: str | None, album: _AlbumState, dir_path: str
    ) -> str | None:
        while True:
            parts = split_cue_line(line or "")
            if len(parts) >= 2:
                name, value = parts[0].lower(), parts[1]
                if name == "performer":
                    album.artist = value
                elif name == "title":
                    album.title = value
                elif name == "songwriter":
                    album.composer = value
                elif name == "file":
                    album.file = value if os.path.isabs(value) else os.path.join(dir_path, value)
                    if len(parts) > 2:
                        album.file_type = parts[2]
                elif name == "rem":
                    if len(parts) < 3:
                        return line
                    key = value.lower()
                    if key == "genre":
                        album.genre = parts[2]
                    elif key == "date":
                        album.date = parts[2]
                    elif key == "discnumber":
                        album.disc = parts[2]
                elif name == "track":
                    return line
            line = reader.read()
            if line is None:
                return None

    @staticmethod
    def _parse_tracks(
        reader: _Lines, line: str | None, album: _AlbumState, out: list[CueEntry]
    ) -> str | None:
        valid_file = album.file_type.upper() not in ("BINARY", "MOTOROLA")
        track_type = index = artist = composer = title = ""

        def keep(entry_index: str, entry_type: str) -> bool:
            return valid_file and bool(entry_index) and entry_type in ("", "audio")

        def make_entry() -> CueEntry:
            return CueEntry(
                file=album.file,
                index=index,
                title=title,
                artist=artist,
                album_artist=album.artist,
                album=album.title,
                composer=composer,
                album_composer=album.composer,
                genre=album.genre,
                date=album.date,
                disc=album.disc,
            )

        while True:
            parts = split_cue_line(line or "")
            if len(parts) >= 2:
                name, value = parts[0].lower(), parts[1]
                additional = parts[2].lower() if len(parts) > 2 else ""
                if name == "track":
                    if keep(index, track_type):
                        out.append(make_entry())
                    track_type = index = artist = title = ""
                    if additional:
                        track_type = additional
                elif name == "index":
                    if additional and (value == "01" or not index):
                        index = additional
                elif name == "performer":
                    artist = value
                elif name == "title":
                    title = value
                elif name == "songwriter":
                    composer = value
                elif name == "file":
                    break
            line = reader.read()
            if line is None:
                break

        if keep(index, track_type):
            out.append(make_entry())
        return line