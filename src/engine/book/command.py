"""Book command: cooldown check, effects, compilation, reply text."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from loguru import logger

from ...config import Settings, get_settings
from ...utils.formatting import translate_color_codes
from ..storage import SQLiteStore
from .compiler import CompiledDocument, PageCompiler
from .cooldown import CooldownGate
from .effects import BOOK_PARTICLES, BookEffects, level_up_sound


@dataclass(frozen=True)
class BookRequest:
    identity: str
    display_name: str
    server_version: Optional[str] = None


@dataclass(frozen=True)
class BookOutcome:
    granted: bool
    message: str
    document: Optional[CompiledDocument] = None


class BookCommand:
    """Hand out achievement books, at most one per cooldown window per identity."""

    def __init__(
        self,
        store: Optional[SQLiteStore] = None,
        settings: Optional[Settings] = None,
        *,
        effects: Optional[BookEffects] = None,
        has_unrestricted_access: Optional[Callable[[str], bool]] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.store = store or SQLiteStore(self.settings.db_path_obj)
        self.effects = effects
        self.gate = CooldownGate(
            self.settings.book_cooldown_ms,
            has_unrestricted_access=has_unrestricted_access or self._is_unrestricted,
            capacity=self.settings.cooldown_capacity,
        )
        self.compiler = PageCompiler(date_template=self.settings.book_date)

    def give_book(self, request: BookRequest, *, now: Optional[datetime] = None) -> BookOutcome:
        """
        Compile a book for ``request.identity`` unless it received one too recently.

        MalformedRecordSequence from the compiler is not caught here; the caller
        decides what the user sees.
        """
        if now is None:
            # The lore date is the server's local day.
            now = datetime.now().astimezone()
        now_ms = int(now.timestamp() * 1000)

        if not self.gate.is_authorized(request.identity, now_ms):
            remaining_ms = self.gate.remaining_ms(request.identity, now_ms)
            return BookOutcome(granted=False, message=self._delay_message(remaining_ms))

        self._play_effects(request)

        achievements = self.store.get_player_achievements_list(
            request.identity, self.settings.book_date_format
        )
        document = self.compiler.compile(
            achievements,
            self.settings.book_separator,
            request.display_name,
            self.settings.book_name,
            now.strftime(self.settings.book_date_format),
        )
        logger.info("Gave a {}-page book to {}", len(document), request.identity)
        return BookOutcome(
            granted=True,
            message=self._chat(self.settings.book_received),
            document=document,
        )

    def _play_effects(self, request: BookRequest) -> None:
        if self.effects is None:
            return
        if self.settings.additional_effects:
            try:
                self.effects.display_particles(request.identity, BOOK_PARTICLES)
            except Exception:
                logger.exception("Error while displaying additional particle effects for books.")
        if self.settings.sound:
            try:
                self.effects.play_sound(request.identity, level_up_sound(request.server_version))
            except Exception:
                logger.exception("Error while playing the book sound.")

    def _is_unrestricted(self, identity: str) -> bool:
        return identity in self.settings.unrestricted_ids

    def _delay_message(self, remaining_ms: int) -> str:
        seconds = max(1, math.ceil(remaining_ms / 1000))
        return self._chat(self.settings.book_delay.replace("TIME", str(seconds)))

    def _chat(self, text: str) -> str:
        return translate_color_codes(self.settings.chat_header + text)


__all__ = ["BookCommand", "BookOutcome", "BookRequest"]
