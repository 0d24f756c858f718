"""Telegram module — adapter entry point."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from telegram import Bot
from telegram.error import TelegramError

from modules.telegram.manifest import MANIFEST
from modules.telegram.tools import TelegramTools
from shared.config import Settings
from shared.dispatcher import Dispatcher
from shared.errors import FatalStartupError
from shared.registry import ToolRegistry
from shared.server import Adapter, run_adapter

logger = structlog.get_logger()


@asynccontextmanager
async def open_adapter(settings: Settings) -> AsyncIterator[Dispatcher]:
    """Initialize the bot (validates the token) and yield a ready dispatcher."""
    settings.require("telegram_bot_token")
    try:
        bot = Bot(token=settings.telegram_bot_token)
        await bot.initialize()
    except TelegramError as e:
        raise FatalStartupError(f"Telegram bot initialization failed: {e}") from e
    logger.info("telegram_bot_ready", username=bot.username)

    try:
        tools = TelegramTools(bot)
        yield Dispatcher(
            ToolRegistry.from_manifest(MANIFEST, tools),
            name="telegram-server",
            version=MANIFEST.version,
            description=MANIFEST.description,
            error_prefix="Telegram API error: ",
        )
    finally:
        await bot.shutdown()


ADAPTER = Adapter(name="telegram", manifest=MANIFEST, open=open_adapter)


def main() -> None:
    sys.exit(run_adapter(ADAPTER))


if __name__ == "__main__":
    main()
