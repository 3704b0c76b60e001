"""Presentation effects played when a book is handed out."""

from __future__ import annotations

import re
from typing import Optional, Protocol

LEVEL_UP_SOUNDS = {
    "legacy": "LEVEL_UP",
    "modern": "ENTITY_PLAYER_LEVELUP",
}
BOOK_PARTICLES = "ENCHANTMENT_TABLE"

# Sound enums were renamed in 1.9.
MODERN_SOUND_MINOR = 9

_VERSION_PATTERN = re.compile(r"^v?(?P<major>\d+)_(?P<minor>\d+)")


class BookEffects(Protocol):
    """Host hooks for particles and sounds; both are best-effort."""

    def display_particles(self, identity: str, effect: str) -> None: ...

    def play_sound(self, identity: str, sound: str) -> None: ...


def sound_feature(server_version: Optional[str]) -> str:
    """Map a package version such as ``v1_8_R3`` to a key of LEVEL_UP_SOUNDS."""
    if not server_version:
        return "modern"
    match = _VERSION_PATTERN.match(server_version.strip())
    if not match:
        return "modern"
    if int(match.group("major")) == 1 and int(match.group("minor")) < MODERN_SOUND_MINOR:
        return "legacy"
    return "modern"


def level_up_sound(server_version: Optional[str]) -> str:
    return LEVEL_UP_SOUNDS[sound_feature(server_version)]


__all__ = [
    "BOOK_PARTICLES",
    "BookEffects",
    "LEVEL_UP_SOUNDS",
    "level_up_sound",
    "sound_feature",
]
