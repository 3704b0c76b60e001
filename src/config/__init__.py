"""Config package exports."""

from .toggles import (
    AllowedLogLevel,
    Settings,
    ensure_database_path,
    get_settings,
)

__all__ = [
    "Settings",
    "AllowedLogLevel",
    "ensure_database_path",
    "get_settings",
]
