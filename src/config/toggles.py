"""Configuration utilities for the achievements book."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

# Load environment variables from a local .env if present.
load_dotenv()


AllowedLogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseModel):
    """Runtime configuration derived from environment variables."""

    telegram_bot_token: str = Field(default="", alias="TELEGRAM_BOT_TOKEN")
    db_path: str = Field(default="./local/achievements.sqlite3", alias="AACH_DB_PATH")
    book_cooldown_sec: int = Field(default=0, alias="AACH_TIME_BOOK")
    book_separator: str = Field(default="", alias="AACH_BOOK_SEPARATOR")
    additional_effects: bool = Field(default=True, alias="AACH_ADDITIONAL_EFFECTS")
    sound: bool = Field(default=True, alias="AACH_SOUND")
    unrestricted_ids: tuple[str, ...] = Field(default=(), alias="AACH_UNRESTRICTED_IDS")
    cooldown_capacity: int = Field(default=4096, alias="AACH_COOLDOWN_CAPACITY")
    log_level: AllowedLogLevel = Field(default="INFO", alias="AACH_LOG_LEVEL")

    # Language strings, colour codes use the '&' marker.
    chat_header: str = Field(default="&7[&6Achievements&7] ", alias="AACH_CHAT_HEADER")
    book_name: str = Field(default="Achievements Book", alias="AACH_BOOK_NAME")
    book_date: str = Field(default="Book created on DATE.", alias="AACH_BOOK_DATE")
    book_received: str = Field(
        default="You received your achievements book!", alias="AACH_BOOK_RECEIVED"
    )
    book_delay: str = Field(
        default="You must wait TIME seconds between each book reception!",
        alias="AACH_BOOK_DELAY",
    )
    book_date_format: str = Field(default="%Y-%m-%d", alias="AACH_BOOK_DATE_FORMAT")

    @field_validator("db_path", mode="before")
    @classmethod
    def _expand_db_path(cls, value: str) -> str:
        path = Path(value).expanduser()
        return str(path)

    @field_validator("book_cooldown_sec")
    @classmethod
    def _validate_cooldown(cls, value: int) -> int:
        if value < 0:
            raise ValueError("AACH_TIME_BOOK must be zero or a positive number of seconds.")
        return value

    @field_validator("cooldown_capacity")
    @classmethod
    def _validate_capacity(cls, value: int) -> int:
        if value < 1:
            raise ValueError("AACH_COOLDOWN_CAPACITY must be at least 1.")
        return value

    @field_validator("unrestricted_ids", mode="before")
    @classmethod
    def _split_ids(cls, value: object) -> object:
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value

    @property
    def db_path_obj(self) -> Path:
        """Return the database path as a Path instance."""
        return Path(self.db_path)

    @property
    def book_cooldown_ms(self) -> int:
        return self.book_cooldown_sec * 1000

    def has_telegram_credentials(self) -> bool:
        """True when a Telegram bot token is configured."""
        return bool(self.telegram_bot_token.strip())


_ENV_KEYS = [
    "TELEGRAM_BOT_TOKEN",
    "AACH_DB_PATH",
    "AACH_TIME_BOOK",
    "AACH_BOOK_SEPARATOR",
    "AACH_ADDITIONAL_EFFECTS",
    "AACH_SOUND",
    "AACH_UNRESTRICTED_IDS",
    "AACH_COOLDOWN_CAPACITY",
    "AACH_LOG_LEVEL",
    "AACH_CHAT_HEADER",
    "AACH_BOOK_NAME",
    "AACH_BOOK_DATE",
    "AACH_BOOK_RECEIVED",
    "AACH_BOOK_DELAY",
    "AACH_BOOK_DATE_FORMAT",
]


def _raw_environment() -> dict[str, Optional[str]]:
    """Snapshot environment variables relevant to the settings (unset keys keep defaults)."""
    snapshot = {key: os.getenv(key) for key in _ENV_KEYS}
    return {key: value for key, value in snapshot.items() if value is not None}


def ensure_database_path(path: Path) -> Path:
    """
    Ensure the SQLite file parent directory exists.

    Returns the resolved path for downstream usage.
    """
    if path.suffix != ".sqlite3":
        path = path.with_suffix(".sqlite3")
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    return path.resolve()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and memoize Settings from the environment."""
    try:
        return Settings(**_raw_environment())
    except ValidationError as exc:
        raise RuntimeError(f"Invalid achievement book configuration: {exc}") from exc


__all__ = [
    "Settings",
    "AllowedLogLevel",
    "ensure_database_path",
    "get_settings",
]
