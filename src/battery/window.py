"""Trailing time-window selection for the battery trend view."""

from datetime import datetime, timedelta
from typing import Sequence

from .models import LogEntry, RecencyWindowPoint

DEFAULT_WINDOW = timedelta(days=7)
DEFAULT_DATE_FORMAT = "%Y-%m-%d"


def windowed(
    entries: Sequence[LogEntry],
    now: datetime,
    window: timedelta = DEFAULT_WINDOW,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> list[RecencyWindowPoint]:
    """Select entries newer than ``now - window`` as trend points.

    Args:
        entries: Store contents, newest first
        now: Reference instant; never read from the clock here
        window: Trailing duration. An entry exactly ``window`` old is excluded.
        date_format: strftime format for each point's display_date

    Returns:
        Points ordered oldest to newest. Same-day entries are kept as
        separate points.
    """
    if window <= timedelta(0):
        return []

    try:
        cutoff = now - window
    except OverflowError:
        # Window reaches past datetime.min: every entry is inside it
        cutoff = None
    recent = [e for e in entries if cutoff is None or e.created_at > cutoff]
    recent.reverse()
    # Stable: equal instants keep insertion order
    recent.sort(key=lambda e: e.created_at)

    return [
        RecencyWindowPoint(
            display_date=e.created_at.strftime(date_format),
            battery_level=e.battery_level,
            mood_label=e.mood_label,
        )
        for e in recent
    ]
