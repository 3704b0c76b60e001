"""Telegram bot bridge for the achievements book."""

from __future__ import annotations

from loguru import logger
from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes

from ..config import get_settings
from ..engine.book import BookCommand, BookRequest, CompiledDocument, MalformedRecordSequence
from ..engine.storage import SQLiteStore
from ..utils.formatting import strip_color_codes
from ..utils.log import configure_logging

# Telegram rejects messages above 4096 characters.
MAX_MESSAGE_LENGTH = 4096


class TelegramBot:
    """High-level coordinator for Telegram interactions."""

    def __init__(self) -> None:
        self.settings = get_settings()
        if not self.settings.has_telegram_credentials():
            raise RuntimeError("TELEGRAM_BOT_TOKEN is missing. Set it in your .env file.")

        self.store = SQLiteStore(self.settings.db_path_obj)
        self.store.migrate()
        self.book_command = BookCommand(store=self.store, settings=self.settings)

    def build_application(self) -> Application:
        application = (
            Application.builder()
            .token(self.settings.telegram_bot_token)
            .post_init(self._post_init)
            .build()
        )

        application.add_handler(CommandHandler("start", self.handle_start))
        application.add_handler(CommandHandler("book", self.handle_book))
        application.add_error_handler(self.handle_error)
        return application

    async def _post_init(self, application: Application) -> None:
        # Ensure migrations are applied before first update.
        self.store.migrate()

    async def handle_start(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        if not update.message:
            return
        await update.message.reply_text(
            "Welcome! Send /book to receive a book of your achievements."
        )

    async def handle_book(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        message = update.effective_message
        user = update.effective_user
        if not message or not user:
            return

        identity = f"telegram:{user.id}"
        self.store.ensure_user(identity, user.full_name)
        request = BookRequest(identity=identity, display_name=user.full_name)
        try:
            outcome = self.book_command.give_book(request)
        except MalformedRecordSequence:
            logger.exception("Error while creating book pages for {}", identity)
            await message.reply_text("Your achievements book could not be created.")
            return

        await message.reply_text(strip_color_codes(outcome.message))
        if outcome.document is None:
            return
        for text in render_book_messages(outcome.document):
            await message.reply_text(text)

    async def handle_error(self, update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        if context.error:
            logger.opt(exception=context.error).error("Telegram error: {}", context.error)


def render_book_messages(document: CompiledDocument) -> list[str]:
    """Render a compiled book as plain-text chat messages: a cover, then one per page."""
    cover = f"{document.title}\nby {document.author}\n{strip_color_codes(document.lore)}"
    messages = split_message(cover)
    total = len(document.pages)
    for number, page in enumerate(document.pages, start=1):
        messages.extend(split_message(f"[{number}/{total}]\n{strip_color_codes(page)}"))
    return messages


def split_message(text: str, limit: int = MAX_MESSAGE_LENGTH) -> list[str]:
    """Split ``text`` into chunks Telegram accepts, preferring line breaks."""
    if len(text) <= limit:
        return [text]
    chunks: list[str] = []
    remaining = text
    while len(remaining) > limit:
        cut = remaining.rfind("\n", 0, limit + 1)
        if cut <= 0:
            cut = limit
        chunks.append(remaining[:cut])
        remaining = remaining[cut:].lstrip("\n")
    if remaining:
        chunks.append(remaining)
    logger.debug("Split a {}-character message into {} parts", len(text), len(chunks))
    return chunks


def main() -> None:
    configure_logging(get_settings().log_level)
    bot = TelegramBot()
    application = bot.build_application()
    application.run_polling()


if __name__ == "__main__":
    main()
