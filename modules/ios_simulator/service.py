"""Thin async wrapper around ``xcrun simctl``."""

from __future__ import annotations

import json

from pydantic import BaseModel

from shared.errors import CapabilityError
from shared.process import run_command

RUNTIME_PREFIX = "com.apple.CoreSimulator.SimRuntime."


class SimulatorDevice(BaseModel):
    udid: str
    name: str
    state: str
    runtime: str


class SimulatorService:
    def __init__(self, command: str = "xcrun", timeout: float = 60.0):
        self.command = command
        self.timeout = timeout

    async def _simctl(self, *args: str) -> str:
        result = await run_command(self.command, "simctl", *args, timeout=self.timeout)
        return result.stdout

    async def list_devices(self) -> list[SimulatorDevice]:
        raw = await self._simctl("list", "devices", "--json")
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CapabilityError(f"Unexpected simctl output: {e}") from e

        devices = []
        for runtime, entries in payload.get("devices", {}).items():
            for entry in entries:
                devices.append(
                    SimulatorDevice(
                        udid=entry["udid"],
                        name=entry["name"],
                        state=entry["state"],
                        runtime=runtime.removeprefix(RUNTIME_PREFIX),
                    )
                )
        return devices

    async def boot(self, device_id: str) -> None:
        await self._simctl("boot", device_id)

    async def shutdown(self, device_id: str) -> None:
        await self._simctl("shutdown", device_id)

    async def install(self, device_id: str, app_path: str) -> None:
        await self._simctl("install", device_id, app_path)

    async def launch(self, device_id: str, bundle_id: str) -> None:
        await self._simctl("launch", device_id, bundle_id)
