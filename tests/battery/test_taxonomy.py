"""Tests for the mood taxonomy and battery bands."""

import pytest

from battery.taxonomy import MOOD_TAXONOMY, all_labels, battery_band, category_for, is_known_label
from shared_types import BatteryBand, MoodCategory


def test_taxonomy_covers_every_category():
    assert set(MOOD_TAXONOMY) == set(MoodCategory)


def test_all_labels_in_order():
    labels = all_labels()
    assert labels[0] == "Energized"
    assert labels[-1] == "Uncomfortable"
    assert len(labels) == 25
    assert len(set(labels)) == len(labels)


def test_category_lookup():
    assert category_for("Calm") == MoodCategory.EMOTIONAL
    assert category_for("Need Space") == MoodCategory.SOCIAL
    assert category_for("Grumpy") is None
    assert is_known_label("Focused")
    assert not is_known_label("")


@pytest.mark.parametrize(
    "level, band",
    [
        (100, BatteryBand.HIGH),
        (71, BatteryBand.HIGH),
        (70, BatteryBand.MEDIUM),
        (31, BatteryBand.MEDIUM),
        (30, BatteryBand.LOW),
        (0, BatteryBand.LOW),
        (-15, BatteryBand.LOW),
        (400, BatteryBand.HIGH),
    ],
)
def test_battery_band(level, band):
    assert battery_band(level) == band
