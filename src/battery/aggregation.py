"""Read facade combining the entry store, trend window and mood ranking."""

from datetime import datetime, timedelta
from typing import Optional

import structlog

from observability import Metrics, metrics as default_metrics

from .models import FrequencyBucket, LogEntry, RecencyWindowPoint
from .ranking import DEFAULT_LIMIT, top_labels
from .store import EntryStore
from .window import DEFAULT_DATE_FORMAT, DEFAULT_WINDOW, windowed

logger = structlog.get_logger()


class MoodAggregator:
    """Derived views over a live EntryStore.

    Views read the store on every call, so a new entry is visible on the very
    next read. The top-moods ranking is memoized against ``store.version``
    and rebuilt in full after any append.
    """

    def __init__(
        self,
        store: EntryStore,
        window: timedelta = DEFAULT_WINDOW,
        limit: int = DEFAULT_LIMIT,
        date_format: str = DEFAULT_DATE_FORMAT,
        metrics: Optional[Metrics] = None,
    ):
        self.store = store
        self.window = window
        self.limit = limit
        self.date_format = date_format
        self.metrics = metrics or default_metrics
        self._top_cache: Optional[tuple[int, list[FrequencyBucket]]] = None

    def append(self, entry: LogEntry) -> None:
        self.store.append(entry)
        self.metrics.counter("entries_appended")

    def recent_trend(self, now: datetime) -> list[RecencyWindowPoint]:
        """Battery trend points inside the configured window, oldest first."""
        with self.metrics.timer("recent_trend"):
            return windowed(self.store.all(), now, self.window, self.date_format)

    def top_moods(self) -> list[FrequencyBucket]:
        """All-time most frequent mood labels, up to the configured limit."""
        version = self.store.version
        if self._top_cache is not None and self._top_cache[0] == version:
            self.metrics.counter("top_moods_cache_hit")
            return list(self._top_cache[1])

        self.metrics.counter("top_moods_cache_miss")
        with self.metrics.timer("top_moods"):
            ranked = top_labels(self.store.all(), self.limit)
        self._top_cache = (version, ranked)
        logger.debug("top_moods_recomputed", version=version, buckets=len(ranked))
        return list(ranked)

    def history(self) -> list[LogEntry]:
        """Every entry, newest first."""
        return self.store.all()
