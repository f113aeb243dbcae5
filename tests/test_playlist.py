import wave

import pytest

from mpz.playlist import MAX_NAME_LEN, Playlist, PlaylistRandom
from mpz.track import Track


def _write_wav(path, frames=800):
    with wave.open(str(path), "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(8000)
        w.writeframes(b"\x00\x00" * frames)


@pytest.fixture
def album(tmp_path):
    directory = tmp_path / "album"
    directory.mkdir()
    for name in ("c.wav", "a.wav", "b.wav"):
        _write_wav(directory / name)
    return directory


def test_rename_short_name_kept():
    pl = Playlist()
    assert pl.rename("Morning") == "Morning"
    assert pl.name == "Morning"


def test_rename_long_name_truncated():
    pl = Playlist()
    result = pl.rename("x" * 100)
    assert len(result) == MAX_NAME_LEN
    assert result == "x" * (MAX_NAME_LEN - 3) + "..."


def test_rename_exact_limit_kept():
    pl = Playlist()
    assert pl.rename("y" * MAX_NAME_LEN) == "y" * MAX_NAME_LEN


def test_default_random_mode():
    assert Playlist().random == PlaylistRandom.NONE


def test_load_directory_sorted_and_named(album):
    pl = Playlist()
    pl.load(album)
    assert pl.name == "album"
    assert [t.filename() for t in pl.tracks] == ["a.wav", "b.wav", "c.wav"]


def test_load_twice_appends(album):
    pl = Playlist()
    pl.load(album)
    pl.load(album)
    assert len(pl.tracks) == 6


def test_load_many_joins_names(tmp_path, album):
    other = tmp_path / "other"
    other.mkdir()
    _write_wav(other / "z.wav")
    pl = Playlist()
    pl.load_many([album, other])
    assert pl.name == "album, other"
    assert [t.filename() for t in pl.tracks] == ["a.wav", "b.wav", "c.wav", "z.wav"]


def test_concat_playlist_file_keeps_order(album):
    m3u = album / "list.m3u"
    m3u.write_text("#EXTM3U\nc.wav\na.wav\n", encoding="utf-8")
    pl = Playlist("keep")
    pl.concat(m3u)
    assert pl.name == "keep"
    assert [t.filename() for t in pl.tracks] == ["c.wav", "a.wav"]


def test_concat_many(album):
    pl = Playlist()
    pl.concat_many([album, album / "a.wav"])
    assert [t.filename() for t in pl.tracks] == ["a.wav", "b.wav", "c.wav", "a.wav"]


def test_load_async_calls_back(album):
    pl = Playlist()
    seen = []
    thread = pl.load_async([album], seen.append)
    thread.join(timeout=10)
    assert seen == [pl]
    assert pl.name == "album"
    assert len(pl.tracks) == 3


def test_concat_async_calls_back(album):
    pl = Playlist("kept")
    seen = []
    pl.concat_async([album], seen.append).join(timeout=10)
    assert seen == [pl]
    assert pl.name == "kept"
    assert len(pl.tracks) == 3


def test_track_lookup():
    first = Track("/m/one.mp3", uid=11)
    second = Track("/m/two.mp3", uid=22)
    pl = Playlist(tracks=[first, second])
    assert pl.has_track(22)
    assert not pl.has_track(33)
    assert pl.track_index(22) == 1
    assert pl.track_index(33) == -1
    assert pl.track_by(11) is first
    missing = pl.track_by(33)
    assert missing.uid == 0
    assert not missing.is_valid()


def test_remove_track():
    tracks = [Track(f"/m/{n}.mp3") for n in "abc"]
    pl = Playlist(tracks=tracks)
    pl.remove_track(1)
    assert pl.tracks == [tracks[0], tracks[2]]
    with pytest.raises(IndexError):
        pl.remove_track(5)


def test_sort_by_title_descending():
    tracks = [Track("/m/x.mp3", title=t) for t in ("Beta", "Alpha", "Gamma")]
    pl = Playlist(tracks=tracks)
    pl.sort_by("-Title")
    assert [t.title() for t in pl.tracks] == ["Gamma", "Beta", "Alpha"]
    pl.sort_by("title")
    assert [t.title() for t in pl.tracks] == ["Alpha", "Beta", "Gamma"]


def test_to_m3u():
    local = Track("/music/a.mp3")
    stream = Track.from_stream("http://radio.example.com/live", "/lists/radio.m3u")
    pl = Playlist(tracks=[local, stream])
    assert pl.to_m3u() == b"/music/a.mp3\nhttp://radio.example.com/live"


def test_to_m3u_empty():
    assert Playlist().to_m3u() == b""


def test_reload_reads_properties(album):
    path = str(album / "a.wav")
    pl = Playlist(tracks=[Track(path)])
    assert pl.tracks[0].duration == 0
    pl.reload()
    assert pl.tracks[0].duration == Track.from_file(path).duration
    assert pl.tracks[0].duration > 0


def test_uids_differ():
    uids = [Playlist().uid for _ in range(20)]
    assert len(set(uids)) == len(uids)