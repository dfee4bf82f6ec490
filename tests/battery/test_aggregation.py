"""Tests for the MoodAggregator facade."""

from datetime import timedelta

import pytest

from battery.aggregation import MoodAggregator
from battery.models import FrequencyBucket, RecencyWindowPoint


@pytest.fixture
def aggregator(store, fresh_metrics):
    return MoodAggregator(store, metrics=fresh_metrics)


def test_empty_store_views(aggregator, t0):
    assert aggregator.recent_trend(t0) == []
    assert aggregator.top_moods() == []
    assert aggregator.history() == []


def test_scenario_recent_point(aggregator, make_entry, t0):
    aggregator.append(make_entry(mood="Calm", battery=80))
    assert aggregator.recent_trend(t0 + timedelta(hours=1)) == [
        RecencyWindowPoint("2024-03-10", 80, "Calm")
    ]


def test_old_entry_counted_but_not_trended(aggregator, make_entry, t0):
    aggregator.append(make_entry(mood="Drained", offset=-timedelta(days=8)))
    assert aggregator.recent_trend(t0) == []
    assert aggregator.top_moods() == [FrequencyBucket("Drained", 1)]


def test_reads_are_live(aggregator, make_entry, t0):
    aggregator.append(make_entry(mood="Calm"))
    assert aggregator.top_moods() == [FrequencyBucket("Calm", 1)]

    aggregator.append(make_entry(mood="Tired"))
    aggregator.append(make_entry(mood="Tired"))
    assert aggregator.top_moods() == [FrequencyBucket("Tired", 2), FrequencyBucket("Calm", 1)]
    assert len(aggregator.recent_trend(t0 + timedelta(minutes=1))) == 3


def test_appends_through_store_are_seen(aggregator, store, make_entry):
    aggregator.top_moods()
    store.append(make_entry(mood="Focused"))
    assert aggregator.top_moods() == [FrequencyBucket("Focused", 1)]


def test_idempotent_reads(aggregator, sample_store, make_entry, t0):
    for e in sample_store.insertion_order():
        aggregator.append(e)
    assert aggregator.recent_trend(t0) == aggregator.recent_trend(t0)
    assert aggregator.top_moods() == aggregator.top_moods()


def test_top_moods_cached_until_append(aggregator, make_entry, fresh_metrics):
    aggregator.append(make_entry(mood="Calm"))
    aggregator.top_moods()
    aggregator.top_moods()
    assert fresh_metrics.count("top_moods_cache_miss") == 1
    assert fresh_metrics.count("top_moods_cache_hit") == 1

    aggregator.append(make_entry(mood="Calm"))
    assert aggregator.top_moods() == [FrequencyBucket("Calm", 2)]
    assert fresh_metrics.count("top_moods_cache_miss") == 2
    assert fresh_metrics.count("entries_appended") == 2


def test_cached_result_not_mutable_by_caller(aggregator, make_entry):
    aggregator.append(make_entry(mood="Calm"))
    first = aggregator.top_moods()
    first.clear()
    assert aggregator.top_moods() == [FrequencyBucket("Calm", 1)]


def test_configured_window_and_limit(store, make_entry, t0, fresh_metrics):
    for i, mood in enumerate(["A", "B", "C"]):
        store.append(make_entry(mood=mood, offset=-timedelta(days=i * 2)))
    agg = MoodAggregator(store, window=timedelta(days=3), limit=2, metrics=fresh_metrics)
    assert [p.mood_label for p in agg.recent_trend(t0 + timedelta(minutes=1))] == ["B", "A"]
    assert len(agg.top_moods()) == 2


def test_tie_break_first_logged_wins(aggregator, make_entry):
    for i, mood in enumerate(["Happy", "Calm", "Happy", "Calm"]):
        aggregator.append(make_entry(mood=mood, offset=timedelta(minutes=i)))
    assert [b.mood_label for b in aggregator.top_moods()] == ["Happy", "Calm"]


def test_history_newest_first(aggregator, make_entry):
    a = make_entry(mood="A")
    b = make_entry(mood="B")
    aggregator.append(a)
    aggregator.append(b)
    assert aggregator.history() == [b, a]
