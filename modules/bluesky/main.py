"""Bluesky module — adapter entry point."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from atproto import AsyncClient

from modules.bluesky.manifest import MANIFEST
from modules.bluesky.tools import BlueskyTools
from shared.config import Settings
from shared.dispatcher import Dispatcher
from shared.errors import FatalStartupError
from shared.registry import ToolRegistry
from shared.server import Adapter, run_adapter

logger = structlog.get_logger()


@asynccontextmanager
async def open_adapter(settings: Settings) -> AsyncIterator[Dispatcher]:
    """Log in once with the app password and yield a ready dispatcher."""
    settings.require("bluesky_identifier", "bluesky_app_key")
    client = AsyncClient(base_url=settings.bluesky_service_url)
    try:
        profile = await client.login(settings.bluesky_identifier, settings.bluesky_app_key)
    except Exception as e:
        raise FatalStartupError(f"Bluesky login failed: {e}") from e
    logger.info("bluesky_logged_in", handle=profile.handle, service=settings.bluesky_service_url)

    tools = BlueskyTools(client, actor=settings.bluesky_identifier)
    yield Dispatcher(
        ToolRegistry.from_manifest(MANIFEST, tools),
        name="bluesky-server",
        version=MANIFEST.version,
        description=MANIFEST.description,
    )


ADAPTER = Adapter(name="bluesky", manifest=MANIFEST, open=open_adapter)


def main() -> None:
    sys.exit(run_adapter(ADAPTER))


if __name__ == "__main__":
    main()
