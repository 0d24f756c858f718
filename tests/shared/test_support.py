"""Tests for configuration, result serialization and the subprocess helper."""

from __future__ import annotations

import json
import sys
from datetime import date, datetime, timezone

import pytest
from pydantic import BaseModel, Field

from shared.config import Settings
from shared.errors import CapabilityError, FatalStartupError
from shared.process import run_command
from shared.serialization import render_text, to_jsonable


# ===================================================================
# Settings
# ===================================================================


class TestSettings:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
        monkeypatch.setenv("HTTP_PORT", "9001")
        settings = Settings(_env_file=None)
        assert settings.telegram_bot_token == "123:abc"
        assert settings.http_port == 9001
        assert settings.transport == "stdio"

    def test_require_passes_when_set(self):
        Settings(_env_file=None, supabase_url="https://x.supabase.co", supabase_key="k").require(
            "supabase_url", "supabase_key"
        )

    def test_require_names_missing_variables(self, monkeypatch):
        monkeypatch.delenv("SUPABASE_URL", raising=False)
        monkeypatch.delenv("SUPABASE_KEY", raising=False)
        with pytest.raises(FatalStartupError) as exc:
            Settings(_env_file=None).require("supabase_url", "supabase_key")
        assert exc.value.message == "SUPABASE_URL and SUPABASE_KEY environment variables are required"

    def test_require_single_variable(self, monkeypatch):
        monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
        with pytest.raises(FatalStartupError, match="TELEGRAM_BOT_TOKEN environment variable is required"):
            Settings(_env_file=None).require("telegram_bot_token")


# ===================================================================
# Serialization
# ===================================================================


class _Profile(BaseModel):
    handle: str
    display_name: str | None = Field(default=None, alias="displayName")
    followers_count: int | None = Field(default=None, alias="followersCount")


class _HasToDict:
    def to_dict(self):
        return {"message_id": 5, "date": datetime(2024, 1, 2, tzinfo=timezone.utc)}


class TestSerialization:
    def test_strings_pass_through(self):
        assert render_text("Available shortcuts:\nA") == "Available shortcuts:\nA"

    def test_models_use_aliases_and_keep_nulls(self):
        profile = _Profile(handle="alice.bsky.social", displayName="Alice")
        assert to_jsonable(profile) == {
            "handle": "alice.bsky.social",
            "displayName": "Alice",
            "followersCount": None,
        }

    def test_model_text_round_trips(self):
        profile = _Profile(handle="alice.bsky.social", displayName="Alice")
        assert _Profile.model_validate(json.loads(render_text(profile))) == profile

    def test_to_dict_objects_and_dates(self):
        value = {"message": _HasToDict(), "day": date(2024, 5, 1)}
        assert to_jsonable(value) == {
            "message": {"message_id": 5, "date": "2024-01-02T00:00:00+00:00"},
            "day": "2024-05-01",
        }

    def test_render_is_parseable_json(self):
        result = [{"title": "Café", "n": 1}]
        text = render_text(result)
        assert json.loads(text) == result
        assert "Café" in text


# ===================================================================
# Subprocess helper
# ===================================================================


class TestRunCommand:
    @pytest.mark.asyncio
    async def test_captures_stdout(self):
        result = await run_command(sys.executable, "-c", "print('hello')")
        assert result.returncode == 0
        assert result.stdout.strip() == "hello"

    @pytest.mark.asyncio
    async def test_non_zero_exit_raises_with_stderr(self):
        with pytest.raises(CapabilityError, match="exit code 3: bad input"):
            await run_command(
                sys.executable, "-c", "import sys; sys.stderr.write('bad input'); sys.exit(3)"
            )

    @pytest.mark.asyncio
    async def test_missing_executable(self):
        with pytest.raises(CapabilityError, match="Command not found: definitely-not-a-command"):
            await run_command("definitely-not-a-command", "list")

    @pytest.mark.asyncio
    async def test_timeout_kills_process(self):
        with pytest.raises(CapabilityError, match="timed out"):
            await run_command(sys.executable, "-c", "import time; time.sleep(5)", timeout=0.2)
