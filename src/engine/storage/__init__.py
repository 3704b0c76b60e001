"""Storage utilities."""

from .sqlite import AchievementEntry, SQLiteStore

__all__ = [
    "SQLiteStore",
    "AchievementEntry",
]
