"""Tests for the telegram module."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from shared.config import Settings
from shared.errors import FatalStartupError


@pytest.fixture
def tools(mock_bot):
    from modules.telegram.tools import TelegramTools

    return TelegramTools(mock_bot)


class TestTelegramTools:
    @pytest.mark.asyncio
    async def test_send_message_passes_parse_mode(self, tools, mock_bot):
        result = await tools.send_message(chat_id="123", text="*bold*", parse_mode="MarkdownV2")

        mock_bot.send_message.assert_awaited_once_with(chat_id="123", text="*bold*", parse_mode="MarkdownV2")
        assert result["ok"] is True
        assert result["message"]["text"] == "*bold*"

    @pytest.mark.asyncio
    async def test_send_photo_from_url(self, tools, mock_bot):
        await tools.send_photo(chat_id="123", photo="https://example.com/cat.jpg")
        kwargs = mock_bot.send_photo.await_args.kwargs
        assert kwargs["photo"] == "https://example.com/cat.jpg"
        assert kwargs["caption"] is None

    @pytest.mark.asyncio
    async def test_send_photo_from_local_file(self, tools, mock_bot, tmp_path):
        image = tmp_path / "cat.jpg"
        image.write_bytes(b"\xff\xd8\xff")

        await tools.send_photo(chat_id="123", photo=str(image), caption="cat")

        kwargs = mock_bot.send_photo.await_args.kwargs
        assert kwargs["photo"] == Path(image)
        assert kwargs["caption"] == "cat"

    @pytest.mark.asyncio
    async def test_get_updates(self, tools, mock_bot):
        update = MagicMock()
        update.to_dict.return_value = {"update_id": 9}
        mock_bot.get_updates.return_value = [update]

        assert await tools.get_updates(limit=5, timeout=0) == [{"update_id": 9}]
        mock_bot.get_updates.assert_awaited_once_with(limit=5, timeout=0)


class TestTelegramAdapter:
    @pytest.mark.asyncio
    async def test_missing_token_is_fatal(self, monkeypatch):
        from modules.telegram.main import open_adapter

        monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
        with pytest.raises(FatalStartupError, match="TELEGRAM_BOT_TOKEN"):
            async with open_adapter(Settings(_env_file=None)):
                pass

    @pytest.mark.asyncio
    async def test_bot_initialized_and_shut_down(self, monkeypatch):
        from modules.telegram import main

        bot = MagicMock()
        bot.initialize = AsyncMock()
        bot.shutdown = AsyncMock()
        bot.username = "test_bot"
        monkeypatch.setattr(main, "Bot", MagicMock(return_value=bot))

        async with main.open_adapter(Settings(_env_file=None, telegram_bot_token="1:abc")) as dispatcher:
            assert dispatcher.name == "telegram-server"
            assert "send_message" in dispatcher.registry
            bot.shutdown.assert_not_awaited()

        bot.initialize.assert_awaited_once()
        bot.shutdown.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rejected_token_is_fatal(self, monkeypatch):
        from telegram.error import InvalidToken

        from modules.telegram import main

        bot = MagicMock()
        bot.initialize = AsyncMock(side_effect=InvalidToken())
        monkeypatch.setattr(main, "Bot", MagicMock(return_value=bot))

        with pytest.raises(FatalStartupError, match="initialization failed"):
            async with main.open_adapter(Settings(_env_file=None, telegram_bot_token="bad")):
                pass
