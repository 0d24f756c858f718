"""Shared test fixtures for the adapter test suite.

Provides mock backing clients and ready-made dispatchers so protocol and
module tests run without network access or platform CLIs.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from shared.dispatcher import Dispatcher
from shared.errors import InvalidParamsError
from shared.registry import ToolRegistry
from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter


# ---------------------------------------------------------------------------
# Telegram bot mock
# ---------------------------------------------------------------------------


def make_telegram_object(payload: dict) -> MagicMock:
    """Mock of a python-telegram-bot object exposing ``to_dict``."""
    obj = MagicMock()
    obj.to_dict.return_value = payload
    return obj


@pytest.fixture
def mock_bot():
    """Mock ``telegram.Bot`` with the calls used by TelegramTools."""
    bot = AsyncMock()
    bot.send_message = AsyncMock(
        side_effect=lambda chat_id, text, parse_mode=None: make_telegram_object(
            {"message_id": 1, "chat": {"id": chat_id}, "text": text}
        )
    )
    bot.send_photo = AsyncMock(return_value=make_telegram_object({"message_id": 2}))
    bot.get_chat = AsyncMock(return_value=make_telegram_object({"id": 42, "type": "private"}))
    bot.get_updates = AsyncMock(return_value=[])
    return bot


@pytest.fixture
def telegram_dispatcher(mock_bot):
    """Dispatcher over the real telegram manifest and a mocked bot."""
    from modules.telegram.manifest import MANIFEST
    from modules.telegram.tools import TelegramTools

    return Dispatcher(
        ToolRegistry.from_manifest(MANIFEST, TelegramTools(mock_bot)),
        name="telegram-server",
        error_prefix="Telegram API error: ",
    )


# ---------------------------------------------------------------------------
# Generic tool target
# ---------------------------------------------------------------------------


class EchoTools:
    """Minimal handler target used by registry and transport tests."""

    def __init__(self):
        self.calls: list[tuple[str, dict]] = []

    async def echo(self, text: str, times: int = 1) -> str:
        self.calls.append(("echo", {"text": text, "times": times}))
        if not text:
            raise InvalidParamsError("Argument 'text' must not be empty")
        return text * times

    async def explode(self) -> str:
        self.calls.append(("explode", {}))
        raise RuntimeError("backend unavailable")


ECHO_MANIFEST = ModuleManifest(
    module_name="echo",
    description="Test tools",
    tools=[
        ToolDefinition(
            name="echo",
            description="Echo text back",
            parameters=[
                ToolParameter(name="text", type="string", description="Text to echo"),
                ToolParameter(
                    name="times",
                    type="integer",
                    description="Repeat count",
                    required=False,
                    default=1,
                    minimum=1,
                    maximum=5,
                ),
            ],
        ),
        ToolDefinition(name="explode", description="Always fails"),
    ],
)


@pytest.fixture
def echo_manifest():
    return ECHO_MANIFEST


@pytest.fixture
def echo_tools():
    return EchoTools()


@pytest.fixture
def echo_dispatcher(echo_tools):
    return Dispatcher(ToolRegistry.from_manifest(ECHO_MANIFEST, echo_tools), name="echo-server")
