"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.errors import FatalStartupError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    log_level: str = "info"
    log_format: str = "json"  # "json" or "console"
    transport: str = "stdio"  # "stdio" or "http"
    http_host: str = "127.0.0.1"
    http_port: int = 8000

    # Subprocess-backed adapters
    command_timeout: float = 60.0

    # Telegram
    telegram_bot_token: str = ""

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    # Postgres function used by execute_sql; must accept a single ``query`` text argument.
    supabase_sql_function: str = "execute_sql"

    # Bluesky: identifier is a handle or DID, app key is an app password
    bluesky_identifier: str = ""
    bluesky_app_key: str = ""
    bluesky_service_url: str = "https://bsky.social"

    # Obsidian
    obsidian_vault_path: str = ""

    # RSS
    rss_request_timeout: float = 30.0
    rss_user_agent: str = "tool-adapters/0.1 (+rss)"

    # iOS simulator / Apple Shortcuts
    simctl_command: str = "xcrun"
    shortcuts_command: str = "shortcuts"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def require(self, *fields: str) -> None:
        """Fail startup if any of *fields* is empty.

        Raises FatalStartupError naming the environment variables to set.
        """
        missing = [name.upper() for name in fields if not getattr(self, name)]
        if missing:
            noun = "variable is" if len(missing) == 1 else "variables are"
            raise FatalStartupError(f"{' and '.join(missing)} environment {noun} required")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
