"""SQLite storage helpers for player achievements."""

from __future__ import annotations

import sqlite3
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from ...config.toggles import ensure_database_path, get_settings

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "docs" / "DB_SCHEMA.sql"


@dataclass(frozen=True)
class AchievementEntry:
    """Representation of a stored achievement."""

    id: int
    user_id: str
    name: str
    description: str
    achieved_at: datetime


class SQLiteStore:
    """Thread-safe helper around sqlite3 for the achievements database."""

    def __init__(self, db_path: Optional[Path] = None) -> None:
        if db_path is None:
            db_path = get_settings().db_path_obj
        self.path = ensure_database_path(db_path)
        self._connection: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    def connect(self) -> sqlite3.Connection:
        """Return (and lazily initialize) the sqlite3 connection."""
        if self._connection is None:
            self._connection = sqlite3.connect(
                self.path,
                check_same_thread=False,
            )
            self._connection.row_factory = sqlite3.Row
        return self._connection

    def migrate(self) -> None:
        """Apply schema migrations from docs/DB_SCHEMA.sql."""
        sql = SCHEMA_PATH.read_text(encoding="utf-8")
        conn = self.connect()
        with self._lock:
            conn.executescript(sql)
            conn.commit()

    def close(self) -> None:
        """Close the connection if open."""
        if self._connection is not None:
            with self._lock:
                self._connection.close()
                self._connection = None

    def ensure_user(self, user_id: str, display_name: Optional[str] = None) -> None:
        """Insert or update a user record."""
        conn = self.connect()
        with self._lock:
            conn.execute(
                """
                INSERT INTO users (id, display_name)
                VALUES (?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    display_name=COALESCE(excluded.display_name, users.display_name),
                    updated_at=CURRENT_TIMESTAMP
                """,
                (user_id, display_name),
            )
            conn.commit()

    def register_achievement(
        self,
        user_id: str,
        name: str,
        description: str,
        achieved_at: Optional[datetime] = None,
    ) -> AchievementEntry:
        """Insert an achievement row for a user and return the created record."""
        if achieved_at is None:
            achieved_at = datetime.now(timezone.utc)
        self.ensure_user(user_id)
        conn = self.connect()
        with self._lock:
            try:
                cursor = conn.execute(
                    """
                    INSERT INTO achievements (user_id, name, description, achieved_at)
                    VALUES (?, ?, ?, ?)
                    """,
                    (user_id, name, description, achieved_at.isoformat()),
                )
            except sqlite3.IntegrityError as exc:
                conn.rollback()
                raise ValueError(f"{user_id} already has the achievement {name!r}.") from exc
            conn.commit()
            new_id = cursor.lastrowid
        logger.debug("Stored achievement {!r} for {}", name, user_id)
        return AchievementEntry(
            id=new_id,
            user_id=user_id,
            name=name,
            description=description,
            achieved_at=achieved_at,
        )

    def fetch_achievements(self, user_id: str) -> list[AchievementEntry]:
        """Return a user's achievements, oldest first."""
        conn = self.connect()
        with self._lock:
            rows = conn.execute(
                """
                SELECT id, user_id, name, description, achieved_at
                FROM achievements
                WHERE user_id = ?
                ORDER BY achieved_at ASC, id ASC
                """,
                (user_id,),
            ).fetchall()
        return [
            AchievementEntry(
                id=row["id"],
                user_id=row["user_id"],
                name=row["name"],
                description=row["description"],
                achieved_at=_parse_datetime(row["achieved_at"]),
            )
            for row in rows
        ]

    def get_player_achievements_list(
        self, user_id: str, date_format: str = "%Y-%m-%d"
    ) -> list[str]:
        """Flatten a user's achievements into ``[name, description, date, ...]``."""
        flat: list[str] = []
        for entry in self.fetch_achievements(user_id):
            flat.extend(
                (entry.name, entry.description, entry.achieved_at.strftime(date_format))
            )
        return flat


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    raise TypeError(f"Unsupported datetime value: {value!r}")


__all__ = ["SQLiteStore", "AchievementEntry"]
