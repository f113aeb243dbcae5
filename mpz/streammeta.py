"""Metadata received from an internet radio stream."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_STREAM_TITLE = re.compile(r"StreamTitle=('|\")(.*?)('|\");")


def _to_uint16(text: str) -> int:
    text = text.strip()
    if not text.isdigit() or not text.isascii():
        return 0
    value = int(text)
    if value > 0xFFFFFFFF:
        return 0
    return value & 0xFFFF


@dataclass
class StreamMetaData:
    """Key/value headers and ICY metadata of a stream."""

    data: dict[str, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.data

    def insert(self, key: str, value: str) -> None:
        self.data[key] = value

    def clear(self) -> None:
        self.data.clear()

    def copy(self) -> StreamMetaData:
        return StreamMetaData(dict(self.data))

    def bitrate(self) -> int:
        return _to_uint16(self.data.get("icy-br", "0"))

    def samplerate(self) -> int:
        return _to_uint16(self.data.get("icy-sr", "0"))

    def _stream_title_parts(self) -> list[str] | None:
        match = _STREAM_TITLE.search(self.data.get("stream", ""))
        if match is None:
            return None
        return match.group(2).split(" - ")

    def artist(self) -> str:
        parts = self._stream_title_parts()
        return parts[0] if parts else ""

    def title(self) -> str:
        parts = self._stream_title_parts()
        return parts[-1] if parts else ""

    def format(self) -> str:
        return self.data.get("content-type", "")