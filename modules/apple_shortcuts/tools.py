"""Apple Shortcuts module tool implementations.

Shortcuts are driven through the macOS ``shortcuts`` command line tool.
"""

from __future__ import annotations

import asyncio
import os
import tempfile
from collections.abc import Callable

import structlog

from shared.errors import CapabilityError
from shared.process import run_command

logger = structlog.get_logger()


def _write_input(text: str) -> str:
    fd, path = tempfile.mkstemp(prefix="shortcut-input-", suffix=".txt")
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(text)
    return path


class ShortcutsTools:
    def __init__(
        self,
        command: str = "shortcuts",
        timeout: float = 60.0,
        on_listed: Callable[[list[str]], None] | None = None,
    ):
        self.command = command
        self.timeout = timeout
        # Called with the names from every ``list_shortcuts`` call.
        self.on_listed = on_listed

    async def available_shortcuts(self) -> list[str]:
        """Names reported by ``shortcuts list``, one per non-blank line."""
        result = await run_command(self.command, "list", timeout=self.timeout)
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    async def list_shortcuts(self) -> str:
        names = await self.available_shortcuts()
        logger.info("shortcuts_listed", count=len(names))
        if self.on_listed is not None:
            self.on_listed(names)
        return "Available shortcuts:\n" + "\n".join(names)

    async def run_shortcut(self, name: str, input: str | None = None) -> str:
        """Run a shortcut by name, passing *input* through a temporary file."""
        args = [self.command, "run", name]
        input_path = None
        if input:
            input_path = await asyncio.to_thread(_write_input, input)
            args += ["--input-path", input_path]

        logger.info("shortcut_started", shortcut=name, has_input=input_path is not None)
        try:
            result = await run_command(*args, timeout=self.timeout)
        except CapabilityError as e:
            raise CapabilityError(f"Failed to run shortcut: {e.message}") from e
        finally:
            if input_path is not None:
                os.unlink(input_path)

        return result.stdout or "Shortcut executed successfully"
