"""iOS simulator module tool implementations."""

from __future__ import annotations

from typing import Any

import structlog

from modules.ios_simulator.service import SimulatorService

logger = structlog.get_logger()


class SimulatorTools:
    def __init__(self, service: SimulatorService):
        self.service = service

    async def list_simulators(self) -> dict[str, Any]:
        """List every simulator known to simctl, across all runtimes."""
        devices = await self.service.list_devices()
        return {"devices": devices}

    async def boot_simulator(self, device_id: str) -> dict[str, Any]:
        await self.service.boot(device_id)
        logger.info("simulator_booted", device_id=device_id)
        return {"success": True, "device_id": device_id}

    async def shutdown_simulator(self, device_id: str) -> dict[str, Any]:
        await self.service.shutdown(device_id)
        logger.info("simulator_shutdown", device_id=device_id)
        return {"success": True, "device_id": device_id}

    async def install_app(self, device_id: str, app_path: str) -> dict[str, Any]:
        await self.service.install(device_id, app_path)
        logger.info("app_installed", device_id=device_id, app_path=app_path)
        return {"success": True, "device_id": device_id, "app_path": app_path}

    async def launch_app(self, device_id: str, bundle_id: str) -> dict[str, Any]:
        await self.service.launch(device_id, bundle_id)
        logger.info("app_launched", device_id=device_id, bundle_id=bundle_id)
        return {"success": True, "device_id": device_id, "bundle_id": bundle_id}
