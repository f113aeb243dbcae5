"""An audio track: a local file, a CUE sheet entry or a network stream."""

from __future__ import annotations

import os
import wave
from urllib.parse import urlsplit, urlunsplit

from mpz.rng import generate_uid
from mpz.streammeta import StreamMetaData

_ID3V1_SIZE = 128


def formatted_time(ms: int) -> str:
    """Format a duration in milliseconds as ``MM:SS``, ``H:MM:SS`` or ``Nd ...``."""
    tm = ms // 1000
    seconds = tm % 60
    minutes = (tm // 60) % 60
    hours = tm // 3600
    if hours == 0:
        return f"{minutes:02d}:{seconds:02d}"
    if hours >= 24:
        days = hours // 24
        return f"{days}d {formatted_time(tm - days * 86400)}"
    return f"{hours:>2}:{minutes:02d}:{seconds:02d}"


def _suffix(path: str) -> str:
    name = os.path.basename(path)
    return name.rpartition(".")[2] if "." in name else ""


def _id3_text(raw: bytes) -> str:
    return raw.split(b"\x00", 1)[0].decode("latin-1").strip()


class Track:
    """A playable item with its tags and audio properties."""

    def __init__(
        self,
        path: str = "",
        begin: int = 0,
        *,
        artist: str = "",
        album: str = "",
        title: str = "",
        track_number: int = 0,
        year: int = 0,
        duration: int = 0,
        channels: int = 0,
        bitrate: int = 0,
        sample_rate: int = 0,
        stream_url: str = "",
        uid: int | None = None,
        cue: bool = False,
    ) -> None:
        self.path = path
        self.begin = begin
        self.album = album
        self.year = year
        self.duration = duration
        self.channels = channels
        self.track_number = track_number
        self.cue = cue
        self.stream_url = stream_url
        self.uid = generate_uid() if uid is None else uid
        self.stream_meta = StreamMetaData()
        self._artist = artist
        self._title = title
        self._bitrate = bitrate
        self._sample_rate = sample_rate
        self._format = "" if stream_url else _suffix(path).upper()

    @classmethod
    def empty(cls) -> Track:
        """An invalid placeholder track with uid 0."""
        return cls(uid=0)

    @classmethod
    def from_file(cls, path: str, begin: int = 0) -> Track:
        """Create a track and read its audio properties and tags from disk."""
        track = cls(path, begin)
        track.fill_audio_properties()
        track._fill_tags()
        return track

    @classmethod
    def from_stream(cls, stream_url: str, path_reference: str = "") -> Track:
        """Create a track for a network stream found in ``path_reference``."""
        return cls(path_reference, stream_url=stream_url)

    def __repr__(self) -> str:
        return f"Track(uid={self.uid}, path={self.path!r}, stream_url={self.stream_url!r})"

    def is_valid(self) -> bool:
        return self.uid != 0 and (
            (bool(self.path) and os.path.exists(self.path)) or self.is_stream()
        )

    def fill_audio_properties(self) -> bool:
        """Read duration, channels, bitrate and sample rate; False if unreadable."""
        try:
            with wave.open(self.path, "rb") as audio:
                channels = audio.getnchannels()
                rate = audio.getframerate()
                frames = audio.getnframes()
                width = audio.getsampwidth()
        except (wave.Error, OSError, EOFError):
            return False
        if rate <= 0:
            return False
        self.duration = frames * 1000 // rate
        self.channels = channels
        self._bitrate = (rate * channels * width * 8 // 1000) & 0xFFFF
        self._sample_rate = rate & 0xFFFF
        return True

    def _fill_tags(self) -> bool:
        try:
            with open(self.path, "rb") as fh:
                fh.seek(0, os.SEEK_END)
                if fh.tell() < _ID3V1_SIZE:
                    return False
                fh.seek(-_ID3V1_SIZE, os.SEEK_END)
                block = fh.read(_ID3V1_SIZE)
        except OSError:
            return False
        if not block.startswith(b"TAG"):
            return False
        self._title = _id3_text(block[3:33])
        self._artist = _id3_text(block[33:63])
        self.album = _id3_text(block[63:93])
        year = _id3_text(block[93:97])
        self.year = int(year) if year.isdigit() else 0
        comment = block[97:127]
        self.track_number = comment[29] if comment[28] == 0 and comment[29] != 0 else 0
        return True

    def reload(self) -> bool:
        return self.fill_audio_properties() and self._fill_tags()

    def is_stream(self) -> bool:
        return bool(self.stream_url)

    def url(self) -> str:
        if self.is_stream():
            return self.stream_url
        if not self.path:
            return ""
        if self.path.startswith("/"):
            return "file://" + self.path
        return "file:" + self.path

    def artist(self) -> str:
        if self.is_stream():
            return self.stream_meta.artist()
        return self._artist

    def _displayable_stream_url(self) -> str:
        parts = urlsplit(self.stream_url)
        netloc = parts.hostname or ""
        try:
            port = parts.port
        except ValueError:
            port = None
        if port is not None:
            netloc += f":{port}"
        return urlunsplit((parts.scheme, netloc, parts.path, "", ""))

    def title(self) -> str:
        if self._title:
            return self._title
        if self.is_stream():
            return self.stream_meta.title() or self._displayable_stream_url()
        return self.filename()

    def bitrate(self) -> int:
        if self.is_stream():
            return self.stream_meta.bitrate()
        return self._bitrate

    def sample_rate(self) -> int:
        if self.is_stream():
            return self.stream_meta.samplerate()
        return self._sample_rate

    def format(self) -> str:
        if self.is_stream():
            return self.stream_meta.format()
        return self._format

    def filename(self) -> str:
        return os.path.basename(self.path)

    def dir(self) -> str:
        """Canonical path of the containing directory, or "" if it does not exist."""
        parent = os.path.dirname(os.path.abspath(self.path))
        return os.path.realpath(parent) if os.path.isdir(parent) else ""

    def formatted_duration(self) -> str:
        return formatted_time(self.duration)

    def formatted_audio_info(self) -> str:
        info = self.format()
        if self.channels == 1:
            info += " Mono"
        elif self.channels == 2:
            info += " Stereo"
        if self.bitrate() > 0:
            info += f" {self.bitrate()}kbps"
        if self.sample_rate() > 0:
            info += f" {self.sample_rate()}Hz"
        return info

    def short_text(self) -> str:
        title = self.title()
        artist = self.artist()
        if title and artist:
            return f"{artist} - {title}"
        if title:
            return title
        if self.filename():
            return self.filename()
        return self.url()

    def formatted_title(self) -> str:
        if self.year == 0:
            return f"{self.artist()} - {self.album} - {self.title()}"
        return f"{self.artist()} - {self.album} ({self.year}) - {self.title()}"

    def set_stream_meta(self, meta: StreamMetaData) -> None:
        self.stream_meta = meta.copy()

    def clear_stream_meta(self) -> None:
        self.stream_meta.clear()