"""Apple Shortcuts module — adapter entry point."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog

from modules.apple_shortcuts.manifest import LIST_SHORTCUTS, MANIFEST, run_shortcut_for
from modules.apple_shortcuts.tools import ShortcutsTools
from shared.config import Settings
from shared.dispatcher import Dispatcher
from shared.registry import RegisteredTool, ToolRegistry, bind_tools
from shared.server import Adapter, run_adapter

logger = structlog.get_logger()


def build_registry(tools: ShortcutsTools) -> ToolRegistry:
    """Registry whose catalog is rebuilt from ``shortcuts list`` on every listing.

    ``list_shortcuts`` calls update the catalog too, so ``run_shortcut``
    accepts whatever that tool just reported.
    """

    def catalog_for(names: list[str]) -> list[RegisteredTool]:
        return bind_tools([run_shortcut_for(names), LIST_SHORTCUTS], tools)

    async def refresher() -> list[RegisteredTool]:
        return catalog_for(await tools.available_shortcuts())

    registry = ToolRegistry(refresher=refresher)
    tools.on_listed = lambda names: registry.replace(catalog_for(names))
    return registry


@asynccontextmanager
async def open_adapter(settings: Settings) -> AsyncIterator[Dispatcher]:
    tools = ShortcutsTools(command=settings.shortcuts_command, timeout=settings.command_timeout)
    registry = build_registry(tools)
    await registry.refresh()
    logger.info("shortcuts_catalog_loaded", tools=registry.names())

    yield Dispatcher(
        registry,
        name="apple-shortcuts",
        version=MANIFEST.version,
        description=MANIFEST.description,
        protocol_errors=False,
    )


ADAPTER = Adapter(name="apple_shortcuts", manifest=MANIFEST, open=open_adapter)


def main() -> None:
    sys.exit(run_adapter(ADAPTER))


if __name__ == "__main__":
    main()
