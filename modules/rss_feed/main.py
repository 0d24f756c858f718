"""RSS feed module — adapter entry point."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from modules.rss_feed.client import FeedClient
from modules.rss_feed.manifest import MANIFEST
from modules.rss_feed.tools import RssFeedTools
from shared.config import Settings
from shared.dispatcher import Dispatcher
from shared.registry import ToolRegistry
from shared.server import Adapter, run_adapter


@asynccontextmanager
async def open_adapter(settings: Settings) -> AsyncIterator[Dispatcher]:
    """Yield a dispatcher sharing one HTTP client across all feed fetches."""
    client = FeedClient(timeout=settings.rss_request_timeout, user_agent=settings.rss_user_agent)
    try:
        yield Dispatcher(
            ToolRegistry.from_manifest(MANIFEST, RssFeedTools(client)),
            name="rss-feed",
            version=MANIFEST.version,
            description=MANIFEST.description,
            error_prefix="Failed to fetch feed: ",
        )
    finally:
        await client.aclose()


ADAPTER = Adapter(name="rss_feed", manifest=MANIFEST, open=open_adapter)


def main() -> None:
    sys.exit(run_adapter(ADAPTER))


if __name__ == "__main__":
    main()
