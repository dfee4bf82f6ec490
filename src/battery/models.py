"""Data models for battery log entries and their derived views."""

import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Optional


def _now_local() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class LogEntry:
    """One immutable self-observation: battery level, mood label, notes."""

    battery_level: int
    mood_label: str
    notes: str = ""
    created_at: datetime = field(default_factory=_now_local)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self):
        if self.created_at.tzinfo is None:
            object.__setattr__(self, "created_at", self.created_at.astimezone())

    @classmethod
    def create(
        cls,
        battery_level: int,
        mood_label: str,
        notes: str = "",
        created_at: Optional[datetime] = None,
    ) -> "LogEntry":
        """Build a new entry, stamping the current local instant if none given."""
        return cls(
            battery_level=battery_level,
            mood_label=mood_label,
            notes=notes or "",
            created_at=created_at or _now_local(),
        )

    @property
    def has_notes(self) -> bool:
        return len(self.notes) > 0

    def display_timestamp(self, fmt: str = "%Y-%m-%d %H:%M") -> str:
        return self.created_at.strftime(fmt)


@dataclass(frozen=True)
class RecencyWindowPoint:
    display_date: str
    battery_level: int
    mood_label: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class FrequencyBucket:
    mood_label: str
    count: int

    def to_dict(self) -> dict:
        return asdict(self)
