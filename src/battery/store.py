"""In-memory, append-only store of log entries for one session."""

from collections import deque
from typing import Iterable

import structlog

from .models import LogEntry

logger = structlog.get_logger()


class EntryStore:
    """Newest-first sequence of LogEntry. The only mutation is prepend."""

    def __init__(self):
        self._entries: deque[LogEntry] = deque()
        self._version = 0

    @classmethod
    def from_entries(cls, entries: Iterable[LogEntry]) -> "EntryStore":
        """Restore a store from entries given in insertion order (oldest first)."""
        store = cls()
        for entry in entries:
            store.append(entry)
        return store

    @property
    def version(self) -> int:
        """Bumped on every append; lets derived views detect staleness."""
        return self._version

    def append(self, entry: LogEntry) -> None:
        self._entries.appendleft(entry)
        self._version += 1
        logger.debug(
            "entry_appended",
            entry_id=entry.id,
            battery_level=entry.battery_level,
            mood_label=entry.mood_label,
            total=len(self._entries),
        )

    def all(self) -> list[LogEntry]:
        """Snapshot of all entries, newest first."""
        return list(self._entries)

    def insertion_order(self) -> list[LogEntry]:
        """Snapshot of all entries, oldest first."""
        return list(reversed(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
