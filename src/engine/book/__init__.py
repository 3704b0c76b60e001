"""Achievement book exports."""

from .command import BookCommand, BookOutcome, BookRequest
from .compiler import (
    AchievementRecord,
    CompiledDocument,
    MalformedRecordSequence,
    PageCompiler,
    group_records,
)
from .cooldown import CooldownGate
from .effects import BOOK_PARTICLES, LEVEL_UP_SOUNDS, BookEffects, level_up_sound

__all__ = [
    "AchievementRecord",
    "BOOK_PARTICLES",
    "BookCommand",
    "BookEffects",
    "BookOutcome",
    "BookRequest",
    "CompiledDocument",
    "CooldownGate",
    "LEVEL_UP_SOUNDS",
    "MalformedRecordSequence",
    "PageCompiler",
    "group_records",
    "level_up_sound",
]
