"""Load a user's achievements from a JSON file into the database.

Usage: python tools/seed_achievements.py <user_id> <achievements.json>

The file holds a list of {"name", "description", "achieved_at"?} objects.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path

from loguru import logger

from src.config import get_settings
from src.engine.storage import SQLiteStore
from src.utils.log import configure_logging


def seed(store: SQLiteStore, user_id: str, entries: list[dict]) -> int:
    added = 0
    for entry in entries:
        achieved_at = entry.get("achieved_at")
        try:
            store.register_achievement(
                user_id,
                entry["name"],
                entry.get("description", ""),
                datetime.fromisoformat(achieved_at) if achieved_at else None,
            )
        except ValueError as exc:
            logger.warning("Skipping {}: {}", entry["name"], exc)
            continue
        added += 1
    return added


def main() -> None:
    configure_logging(get_settings().log_level)
    if len(sys.argv) != 3:
        print(__doc__)  # noqa: T201
        sys.exit(2)

    user_id, source = sys.argv[1], Path(sys.argv[2])
    entries = json.loads(source.read_text(encoding="utf-8"))
    store = SQLiteStore()
    store.migrate()
    added = seed(store, user_id, entries)
    logger.info("Added {} of {} achievements for {}", added, len(entries), user_id)


if __name__ == "__main__":
    main()
