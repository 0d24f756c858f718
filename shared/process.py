"""Async subprocess helper for adapters backed by local CLIs."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import structlog

from shared.errors import CapabilityError

logger = structlog.get_logger()

MAX_ERROR_OUTPUT = 2000  # chars of stderr kept in failure messages


@dataclass
class CommandResult:
    returncode: int
    stdout: str
    stderr: str


async def run_command(*args: str, timeout: float = 60.0) -> CommandResult:
    """Run a command without a shell and return its decoded output.

    Raises CapabilityError if the executable is missing, the command times
    out, or it exits non-zero.
    """
    logger.debug("command_started", command=args[0], args=list(args[1:]))
    try:
        proc = await asyncio.create_subprocess_exec(
            *args,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as e:
        raise CapabilityError(f"Command not found: {args[0]}") from e

    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError as e:
        proc.kill()
        await proc.wait()
        raise CapabilityError(f"Command timed out after {timeout:g}s: {' '.join(args)}") from e

    result = CommandResult(
        returncode=proc.returncode if proc.returncode is not None else -1,
        stdout=stdout.decode(errors="replace"),
        stderr=stderr.decode(errors="replace"),
    )
    if result.returncode != 0:
        detail = result.stderr.strip()[:MAX_ERROR_OUTPUT] or result.stdout.strip()[:MAX_ERROR_OUTPUT]
        raise CapabilityError(
            f"Command failed ({' '.join(args)}) with exit code {result.returncode}"
            + (f": {detail}" if detail else "")
        )
    return result
