import pytest

from mpz.formats import (
    is_supported_file,
    supported_file_formats,
    supported_playlist_file_formats,
)


def test_audio_formats_include_common_types():
    formats = supported_file_formats()
    assert "mp3" in formats
    assert "flac" in formats
    assert "cue" in formats


def test_playlist_formats():
    assert supported_playlist_file_formats() == ["m3u", "m3u8", "pls"]


def test_playlist_formats_are_not_audio_formats():
    audio = set(supported_file_formats())
    assert audio.isdisjoint(supported_playlist_file_formats())


def test_every_listed_format_is_supported():
    for ext in supported_file_formats():
        assert is_supported_file("track." + ext)
        assert is_supported_file("TRACK." + ext.upper())


@pytest.mark.parametrize("name", ["song.mp3", "SONG.FLAC", "/music/a.opus", "x.dsf", "disc.Cue"])
def test_supported_names(name):
    assert is_supported_file(name) is True


@pytest.mark.parametrize("name", ["cover.jpg", "song.mp3.txt", "", "list.m3u"])
def test_unsupported_names(name):
    assert is_supported_file(name) is False