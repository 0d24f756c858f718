"""Telegram module tool implementations."""

from __future__ import annotations

from pathlib import Path

import structlog
from telegram import Bot

logger = structlog.get_logger()


def _local_file(value: str) -> Path | None:
    """Return a Path if *value* names an existing local file."""
    try:
        path = Path(value).expanduser()
        return path if path.is_file() else None
    except (OSError, ValueError):
        return None


class TelegramTools:
    """Tool implementations backed by a python-telegram-bot ``Bot``."""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send_message(self, chat_id: str, text: str, parse_mode: str | None = None) -> dict:
        """Send a text message."""
        message = await self.bot.send_message(chat_id=chat_id, text=text, parse_mode=parse_mode)
        logger.info("telegram_message_sent", chat_id=chat_id)
        return {"ok": True, "chat_id": chat_id, "message": message.to_dict()}

    async def get_chat(self, chat_id: str) -> dict:
        """Return chat metadata."""
        chat = await self.bot.get_chat(chat_id=chat_id)
        return chat.to_dict()

    async def send_photo(self, chat_id: str, photo: str, caption: str | None = None) -> dict:
        """Send a photo given as URL, file_id or local path."""
        payload = _local_file(photo) or photo
        message = await self.bot.send_photo(chat_id=chat_id, photo=payload, caption=caption)
        logger.info("telegram_photo_sent", chat_id=chat_id, local_file=isinstance(payload, Path))
        return {"ok": True, "chat_id": chat_id, "message": message.to_dict()}

    async def get_updates(self, limit: int = 10, timeout: int = 0) -> list[dict]:
        """Fetch pending updates for the bot."""
        updates = await self.bot.get_updates(limit=limit, timeout=timeout)
        return [update.to_dict() for update in updates]
