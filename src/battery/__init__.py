from .aggregation import MoodAggregator
from .models import FrequencyBucket, LogEntry, RecencyWindowPoint
from .ranking import top_labels
from .store import EntryStore
from .window import windowed

__all__ = [
    "EntryStore",
    "FrequencyBucket",
    "LogEntry",
    "MoodAggregator",
    "RecencyWindowPoint",
    "top_labels",
    "windowed",
]
