"""CLI helper to initialize the achievements SQLite database."""

from __future__ import annotations

from loguru import logger

from ...config import get_settings
from ...utils.log import configure_logging
from .sqlite import SQLiteStore


def main() -> None:
    configure_logging(get_settings().log_level)
    store = SQLiteStore()
    store.migrate()
    logger.info("SQLite database ready at {}", store.path)


if __name__ == "__main__":
    main()
