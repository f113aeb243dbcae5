"""Configuration of the playlist table's columns."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from mpz.track import Track


class Alignment(Enum):
    """Horizontal alignment of a column's text."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class Column:
    """One table column: relative width, stretch flag, shown field and alignment."""

    width: float
    stretch: bool
    field: str
    align: Alignment = Alignment.LEFT


def _default_columns() -> list[Column]:
    return [
        Column(0.28, False, "artist"),
        Column(0.28, False, "album"),
        Column(0.28, False, "title"),
        Column(0.05, False, "year", Alignment.RIGHT),
        Column(0.0, True, "length", Alignment.RIGHT),
    ]


_VALUES = {
    "artist": lambda t: t.artist(),
    "album": lambda t: t.album,
    "title": lambda t: t.title(),
    "length": lambda t: t.formatted_duration(),
    "path": lambda t: t.path,
    "url": lambda t: t.url(),
    "bitrate": lambda t: str(t.bitrate()),
    "channels": lambda t: str(t.channels),
    "sample_rate": lambda t: str(t.sample_rate()),
    "track_number": lambda t: str(t.track_number),
    "format": lambda t: t.format(),
    "filename": lambda t: t.filename(),
}


class ColumnsConfig:
    """Ordered columns; column numbers start at 1."""

    def __init__(self, columns: Iterable[Column] | None = None) -> None:
        self.columns = _default_columns() if columns is None else list(columns)
        self.validate()

    def serialize(self) -> list[dict[str, Any]]:
        """Plain data suitable for a configuration file."""
        return [
            {
                "width_percent": int(c.width * 100),
                "align": "right" if c.align is Alignment.RIGHT else "left",
                "stretch": c.stretch,
                "field": c.field,
            }
            for c in self.columns
        ]

    def validate(self) -> None:
        """Raise ValueError if any entry is not a column."""
        if not all(isinstance(c, Column) for c in self.columns):
            raise ValueError("invalid columns config")

    def count(self) -> int:
        return len(self.columns)

    def column(self, col: int) -> Column:
        if not 1 <= col <= len(self.columns):
            raise IndexError(f"column {col} out of range")
        return self.columns[col - 1]

    def value(self, col: int, track: Track) -> str:
        """Text shown in column ``col`` for ``track``."""
        field = self.column(col).field
        if field == "year":
            return str(track.year) if track.year > 0 else ""
        getter = _VALUES.get(field)
        return getter(track) if getter else ""


def deserialize(data: Any) -> ColumnsConfig:
    """Build a configuration from the output of :meth:`ColumnsConfig.serialize`."""
    if not isinstance(data, list):
        raise ValueError("invalid columns config")
    columns = []
    for entry in data:
        if not isinstance(entry, Mapping):
            raise ValueError("invalid columns config")
        columns.append(
            Column(
                width=int(entry.get("width_percent", 0)) / 100.0,
                stretch=bool(entry.get("stretch", False)),
                field=str(entry.get("field", "")),
                align=Alignment.RIGHT if entry.get("align") == "right" else Alignment.LEFT,
            )
        )
    return ColumnsConfig(columns)