"""Fixed mood taxonomy and battery level bands used by the capture layer."""

from typing import Optional

from shared_types import BatteryBand, MoodCategory

MOOD_TAXONOMY: dict[MoodCategory, tuple[str, ...]] = {
    MoodCategory.ENERGY: ("Energized", "Content", "Tired", "Exhausted", "Drained"),
    MoodCategory.SOCIAL: (
        "Need Space",
        "Open to Interaction",
        "Seeking Connection",
        "Social Overload",
    ),
    MoodCategory.EMOTIONAL: ("Calm", "Anxious", "Peaceful", "Overwhelmed", "Frustrated", "Happy"),
    MoodCategory.MENTAL: ("Focused", "Scattered", "Creative", "Overthinking", "Clear-minded"),
    MoodCategory.PHYSICAL: ("Relaxed", "Tense", "Restless", "Grounded", "Uncomfortable"),
}

HIGH_THRESHOLD = 70
MEDIUM_THRESHOLD = 30


def all_labels() -> list[str]:
    """Flat list of labels in taxonomy order."""
    return [label for labels in MOOD_TAXONOMY.values() for label in labels]


def category_for(label: str) -> Optional[MoodCategory]:
    for category, labels in MOOD_TAXONOMY.items():
        if label in labels:
            return category
    return None


def is_known_label(label: str) -> bool:
    return category_for(label) is not None


def battery_band(level: int) -> BatteryBand:
    """Bucket a battery level; total over all integers."""
    if level > HIGH_THRESHOLD:
        return BatteryBand.HIGH
    if level > MEDIUM_THRESHOLD:
        return BatteryBand.MEDIUM
    return BatteryBand.LOW
