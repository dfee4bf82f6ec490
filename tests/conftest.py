"""Shared test fixtures for the social battery tracker."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from battery import EntryStore, LogEntry  # noqa: E402
from observability import Metrics  # noqa: E402


@pytest.fixture
def t0():
    """Fixed reference instant so window tests never depend on the clock."""
    return datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_entry(t0):
    """Factory for entries offset from t0."""

    def _make(mood="Calm", battery=80, notes="", offset=timedelta(0)):
        return LogEntry.create(
            battery_level=battery,
            mood_label=mood,
            notes=notes,
            created_at=t0 + offset,
        )

    return _make


@pytest.fixture
def store():
    return EntryStore()


@pytest.fixture
def sample_store(make_entry):
    """Week of entries, appended chronologically."""
    s = EntryStore()
    for days_ago, mood, battery, notes in [
        (10, "Drained", 15, "Conference all day"),
        (6, "Calm", 70, ""),
        (4, "Happy", 85, "Dinner with two friends"),
        (2, "Calm", 60, ""),
        (1, "Tired", 35, ""),
    ]:
        s.append(make_entry(mood=mood, battery=battery, notes=notes, offset=-timedelta(days=days_ago)))
    return s


@pytest.fixture
def fresh_metrics():
    return Metrics()
