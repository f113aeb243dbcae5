"""Named sorting criteria offered in the sort menu."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from mpz.sorter import default_criteria

HELP_TEXT = (
    "Fields available to sort (case insensitive):\n"
    " * Artist\n"
    " * Album\n"
    " * Title\n"
    " * Year\n"
    " * Filename\n"
    " * TrackNumber\n"
    " * Directory\n"
    "\n"
    "By default sort in ascending order. Add - before the field name to change to descending order.\n"
    "Use / to build nested multilevel sorting criteria. Examples:\n"
    " * Artist / -Year / Title : sort first by artist, then by year in descending order, then by title\n"
    " * -Title : sort only by title in descending order\n"
)


@dataclass(frozen=True)
class SortingPreset:
    """Sorting criteria with an optional display name."""

    name: str
    criteria: str

    def label(self) -> str:
        """Text shown in the sort menu."""
        return self.name or self.criteria


def standard_presets() -> list[SortingPreset]:
    """Presets used when none have been configured."""
    return [
        SortingPreset("", "Title"),
        SortingPreset("", "-Title"),
        SortingPreset("", "Artist"),
        SortingPreset("", "-Artist"),
        SortingPreset("", "Album / Title"),
        SortingPreset("", "-Album / Title"),
        SortingPreset("", "Arist / Album / TrackNumber / Filename / Title"),
    ]


class SortingPresets:
    """Editable list of sorting presets."""

    def __init__(self, presets: Iterable[SortingPreset] = ()) -> None:
        self.presets: list[SortingPreset] = list(presets)

    def __len__(self) -> int:
        return len(self.presets)

    def _valid_row(self, row: int) -> bool:
        return 0 <= row < len(self.presets)

    def add(self, criteria: str) -> bool:
        """Append an unnamed preset; empty criteria are ignored."""
        if not criteria:
            return False
        self.presets.append(SortingPreset("", criteria))
        return True

    def rename(self, row: int, name: str) -> bool:
        """Give the preset at ``row`` a name; invalid rows and empty names are ignored."""
        if not self._valid_row(row) or not name:
            return False
        self.presets[row] = SortingPreset(name, self.presets[row].criteria)
        return True

    def remove(self, row: int) -> bool:
        """Delete the preset at ``row``; invalid rows are ignored."""
        if not self._valid_row(row):
            return False
        del self.presets[row]
        return True

    def item_list(self) -> list[str]:
        """Lines of the presets editor: criteria, followed by the name in parentheses."""
        return [
            p.criteria if not p.name or p.name == p.criteria else f"{p.criteria} ({p.name})"
            for p in self.presets
        ]

    def menu_entries(self) -> list[tuple[str, str]]:
        """``(label, criteria)`` pairs of the sort menu, the default first.

        With no presets configured the standard ones are installed first.
        """
        if not self.presets:
            self.presets = standard_presets()
        return [("Default", default_criteria())] + [(p.label(), p.criteria) for p in self.presets]