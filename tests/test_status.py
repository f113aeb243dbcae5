import pytest

from mpz.status import PAUSED, PLAYING, STOPPED, StatusText, humanized_bytes
from mpz.track import Track


@pytest.fixture
def track():
    return Track("/m/a.mp3", artist="Artist", title="Song")


def test_humanized_bytes_small():
    assert humanized_bytes(512) == "512 bytes"
    assert humanized_bytes(0) == "0 bytes"


def test_humanized_bytes_units():
    assert humanized_bytes(1024) == "1 KB"
    assert humanized_bytes(1024 ** 2) == "1 MB"
    assert humanized_bytes(1024 ** 4).endswith(" TB")


def test_humanized_bytes_caps_at_largest_unit():
    result = humanized_bytes(1024 ** 5)
    assert result == f"{1024} TB"


def test_initial_state():
    status = StatusText()
    assert status.state == STOPPED
    assert status.text == STOPPED


def test_started(track):
    status = StatusText()
    text = status.started(track)
    assert text == f"{PLAYING}: {track.short_text()} | {track.formatted_audio_info()}"
    assert status.text == text


def test_paused(track):
    status = StatusText()
    status.started(track)
    assert status.paused(track).startswith(PAUSED + ": ")
    assert status.state == PAUSED


def test_track_title(track):
    status = StatusText()
    status.started(track)
    assert status.track_title().strip() == track.short_text()


def test_buffer_ignored_when_stopped(track):
    status = StatusText()
    status.stream_buffer_fill(track, 2048)
    assert status.text == STOPPED
    assert status.stream_buffer == 2048


def test_buffer_shown_when_playing(track):
    status = StatusText()
    status.started(track)
    text = status.stream_buffer_fill(track, 2048)
    assert text.endswith(" | stream buffer " + humanized_bytes(2048))


def test_started_resets_buffer(track):
    status = StatusText()
    status.started(track)
    status.stream_buffer_fill(track, 4096)
    status.started(track)
    assert status.stream_buffer == 0
    assert "stream buffer" not in status.text


def test_progress_refreshes(track):
    status = StatusText()
    status.started(track)
    other = Track("/m/b.mp3", artist="Other", title="Tune")
    status.progress(other, 10)
    assert status.track_title().strip() == other.short_text()


def test_stopped_resets(track):
    status = StatusText()
    status.started(track)
    status.stream_buffer_fill(track, 100)
    assert status.stopped() == STOPPED
    assert status.stream_buffer == 0