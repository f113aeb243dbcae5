"""History of played tracks and accumulated playing time."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from mpz.track import Track

DEFAULT_LOG_SIZE = 100
COLUMNS = 2


@dataclass
class LogItem:
    """One played track: its uid, shown text and when it was logged."""

    track_uid: int
    text: str
    time: datetime = field(default_factory=datetime.now)


class PlaybackLog:
    """Bounded log, newest item first, plus total and session play time in seconds."""

    def __init__(
        self,
        max_size: int = DEFAULT_LOG_SIZE,
        total_play_time: int = 0,
        save_total: Callable[[int], None] | None = None,
    ) -> None:
        if max_size < 1:
            raise ValueError(f"log size must be positive, got {max_size}")
        self.max_size = max_size
        self.items: deque[LogItem] = deque()
        self.total_play_time = total_play_time
        self.session_play_time = 0
        self._save_total = save_total

    def __len__(self) -> int:
        return len(self.items)

    def append(self, item: LogItem) -> None:
        """Add ``item`` as the newest entry, dropping the oldest when full."""
        if len(self.items) >= self.max_size:
            self.items.pop()
        self.items.appendleft(item)

    def last(self) -> LogItem:
        """The newest entry; raises IndexError if the log is empty."""
        if not self.items:
            raise IndexError("playback log is empty")
        return self.items[0]

    def item_at(self, row: int) -> LogItem:
        return self.items[row]

    def cell(self, row: int, col: int) -> str:
        """Column 0 is the time as HH:MM:SS, column 1 the text."""
        item = self.items[row]
        if col == 0:
            return item.time.strftime("%H:%M:%S")
        if col == 1:
            return item.text
        raise IndexError(f"column {col} out of range")

    def to_csv(self) -> str:
        return "\n".join(
            ",".join(self.cell(row, col) for col in range(COLUMNS)) for row in range(len(self.items))
        )

    def increment_play_time(self, by: int = 1) -> None:
        """Add ``by`` seconds to both counters and save the total."""
        self.total_play_time += by
        self.session_play_time += by
        if self._save_total is not None:
            self._save_total(self.total_play_time)


class PlaybackLogController:
    """Decides which played tracks get logged."""

    def __init__(
        self,
        log_size: int = 0,
        total_play_time: int = 0,
        save_total: Callable[[int], None] | None = None,
    ) -> None:
        size = log_size if log_size > 0 else DEFAULT_LOG_SIZE
        self.log = PlaybackLog(size, total_play_time, save_total)

    def append(self, track: Track) -> None:
        """Log ``track`` unless it is a stream without metadata or repeats the last entry."""
        if track.is_stream() and track.stream_meta.is_empty():
            return
        text = track.short_text() if track.is_stream() else track.formatted_title()
        item = LogItem(track.uid, text)
        if len(self.log) > 0:
            last = self.log.last()
            if last.text == item.text and last.track_uid == item.track_uid:
                return
        self.log.append(item)

    def increment_play_time(self, by: int) -> None:
        self.log.increment_play_time(by)