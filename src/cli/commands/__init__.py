"""CLI command modules."""

from .mood import moods
from .report import report
from .session import session

__all__ = [
    "moods",
    "report",
    "session",
]
