"""iOS simulator module — adapter entry point."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from modules.ios_simulator.manifest import MANIFEST
from modules.ios_simulator.service import SimulatorService
from modules.ios_simulator.tools import SimulatorTools
from shared.config import Settings
from shared.dispatcher import Dispatcher
from shared.registry import ToolRegistry
from shared.server import Adapter, run_adapter


@asynccontextmanager
async def open_adapter(settings: Settings) -> AsyncIterator[Dispatcher]:
    service = SimulatorService(command=settings.simctl_command, timeout=settings.command_timeout)
    yield Dispatcher(
        ToolRegistry.from_manifest(MANIFEST, SimulatorTools(service)),
        name="ios-simulator-server",
        version=MANIFEST.version,
        description=MANIFEST.description,
    )


ADAPTER = Adapter(name="ios_simulator", manifest=MANIFEST, open=open_adapter)


def main() -> None:
    sys.exit(run_adapter(ADAPTER))


if __name__ == "__main__":
    main()
