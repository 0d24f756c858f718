"""Obsidian module — adapter entry point."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog

from modules.obsidian.manifest import MANIFEST
from modules.obsidian.tools import ObsidianTools
from shared.config import Settings
from shared.dispatcher import Dispatcher
from shared.errors import FatalStartupError
from shared.registry import ToolRegistry
from shared.server import Adapter, run_adapter

logger = structlog.get_logger()


@asynccontextmanager
async def open_adapter(settings: Settings) -> AsyncIterator[Dispatcher]:
    """Check the vault directory exists and yield a ready dispatcher."""
    settings.require("obsidian_vault_path")
    tools = ObsidianTools(settings.obsidian_vault_path)
    if not tools.root.is_dir():
        raise FatalStartupError(f"Obsidian vault not found: {tools.root}")
    logger.info("obsidian_vault_ready", vault=str(tools.root))

    yield Dispatcher(
        ToolRegistry.from_manifest(MANIFEST, tools),
        name="obsidian-server",
        version=MANIFEST.version,
        description=MANIFEST.description,
    )


ADAPTER = Adapter(name="obsidian", manifest=MANIFEST, open=open_adapter)


def main() -> None:
    sys.exit(run_adapter(ADAPTER))


if __name__ == "__main__":
    main()
