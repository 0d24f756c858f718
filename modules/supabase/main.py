"""Supabase module — adapter entry point."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from supabase import acreate_client

from modules.supabase.manifest import MANIFEST
from modules.supabase.tools import SupabaseTools
from shared.config import Settings
from shared.dispatcher import Dispatcher
from shared.errors import FatalStartupError
from shared.registry import ToolRegistry
from shared.server import Adapter, run_adapter

logger = structlog.get_logger()


@asynccontextmanager
async def open_adapter(settings: Settings) -> AsyncIterator[Dispatcher]:
    """Create the Supabase client once and yield a ready dispatcher."""
    settings.require("supabase_url", "supabase_key")
    try:
        client = await acreate_client(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        raise FatalStartupError(f"Supabase client creation failed: {e}") from e
    logger.info("supabase_client_ready", url=settings.supabase_url)

    tools = SupabaseTools(client, sql_function=settings.supabase_sql_function)
    yield Dispatcher(
        ToolRegistry.from_manifest(MANIFEST, tools),
        name="supabase-server",
        version=MANIFEST.version,
        description=MANIFEST.description,
        error_prefix="Error: ",
    )


ADAPTER = Adapter(name="supabase", manifest=MANIFEST, open=open_adapter)


def main() -> None:
    sys.exit(run_adapter(ADAPTER))


if __name__ == "__main__":
    main()
