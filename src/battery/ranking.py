"""All-time mood label frequency ranking."""

from typing import Sequence

from .models import FrequencyBucket, LogEntry

DEFAULT_LIMIT = 5


def top_labels(entries: Sequence[LogEntry], limit: int = DEFAULT_LIMIT) -> list[FrequencyBucket]:
    """Rank mood labels by count, descending.

    Ties go to the label that was logged first in the session. ``entries`` is
    newest-first, so the first occurrence is found walking it in reverse.

    Args:
        entries: Store contents, newest first
        limit: Max buckets to return; <= 0 returns nothing

    Returns:
        At most ``limit`` FrequencyBucket items
    """
    if limit <= 0 or not entries:
        return []

    counts: dict[str, int] = {}
    first_seen: dict[str, int] = {}
    for index, entry in enumerate(reversed(entries)):
        label = entry.mood_label
        if label not in first_seen:
            first_seen[label] = index
        counts[label] = counts.get(label, 0) + 1

    ranked = sorted(counts, key=lambda label: (-counts[label], first_seen[label]))
    return [FrequencyBucket(mood_label=label, count=counts[label]) for label in ranked[:limit]]
