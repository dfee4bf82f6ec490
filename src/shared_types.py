"""Shared enums and types for the social battery tracker."""

from enum import StrEnum


class MoodCategory(StrEnum):
    ENERGY = "Energy Levels"
    SOCIAL = "Social States"
    EMOTIONAL = "Emotional States"
    MENTAL = "Mental States"
    PHYSICAL = "Physical States"


class BatteryBand(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ExportFormat(StrEnum):
    JSON = "json"
    MARKDOWN = "markdown"
