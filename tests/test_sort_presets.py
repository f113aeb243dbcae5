from mpz.sort_presets import SortingPreset, SortingPresets, standard_presets
from mpz.sorter import default_criteria


def test_standard_presets_start_with_title():
    presets = standard_presets()
    assert presets[0] == SortingPreset("", "Title")
    assert all(p.name == "" for p in presets)


def test_add_appends_and_ignores_empty():
    presets = SortingPresets()
    assert presets.add("Artist / -Year") is True
    assert presets.add("") is False
    assert presets.presets == [SortingPreset("", "Artist / -Year")]


def test_rename_and_item_list():
    presets = SortingPresets([SortingPreset("", "Artist"), SortingPreset("", "Year")])
    assert presets.rename(0, "by artist") is True
    assert presets.rename(1, "Year") is True
    assert presets.item_list() == ["Artist (by artist)", "Year"]


def test_rename_rejects_bad_row_and_empty_name():
    presets = SortingPresets([SortingPreset("", "Artist")])
    assert presets.rename(5, "x") is False
    assert presets.rename(0, "") is False
    assert presets.presets == [SortingPreset("", "Artist")]


def test_remove():
    presets = SortingPresets([SortingPreset("", "Artist"), SortingPreset("", "Title")])
    assert presets.remove(-1) is False
    assert presets.remove(0) is True
    assert presets.item_list() == ["Title"]


def test_menu_entries_install_standard_presets_when_empty():
    presets = SortingPresets()
    entries = presets.menu_entries()
    assert entries[0] == ("Default", default_criteria())
    assert len(entries) == len(standard_presets()) + 1
    assert presets.presets == standard_presets()


def test_menu_entries_use_names_as_labels():
    presets = SortingPresets([SortingPreset("mine", "-Title"), SortingPreset("", "Album")])
    assert presets.menu_entries()[1:] == [("mine", "-Title"), ("Album", "Album")]