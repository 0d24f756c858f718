"""Adapter process lifecycle.

An adapter module exposes an :class:`Adapter` whose ``open`` callable is an
async context manager yielding a ready :class:`Dispatcher`. ``run_adapter``
resolves configuration, opens the adapter (failing fast on missing config or
a failed initial login), serves it over the chosen transport and returns the
process exit status.
"""

from __future__ import annotations

import asyncio
import contextlib
import signal
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

import structlog
from pydantic import ValidationError

from shared.config import Settings, get_settings
from shared.dispatcher import Dispatcher
from shared.errors import FatalStartupError
from shared.logging_config import configure_logging
from shared.schemas.tools import ModuleManifest
from shared.transport.stdio import StdioTransport, open_stdio

logger = structlog.get_logger()

TRANSPORTS = ("stdio", "http")


@dataclass(frozen=True)
class Adapter:
    """Entry point of one adapter module."""

    name: str
    manifest: ModuleManifest
    open: Callable[[Settings], AbstractAsyncContextManager[Dispatcher]]


async def serve_stdio(dispatcher: Dispatcher) -> None:
    """Serve over stdin/stdout until EOF, SIGINT or SIGTERM."""
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()
    handled = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        with contextlib.suppress(NotImplementedError, RuntimeError):
            loop.add_signal_handler(sig, stop.set)
            handled.append(sig)

    reader, writer = await open_stdio()
    transport = StdioTransport(dispatcher)
    logger.info("server_running", service=dispatcher.name, transport="stdio")
    try:
        await transport.serve(reader, writer, stop)
    finally:
        writer.close()
        for sig in handled:
            loop.remove_signal_handler(sig)
    logger.info("server_stopped", service=dispatcher.name)


async def serve_http(dispatcher: Dispatcher, host: str, port: int) -> None:
    """Serve the FastAPI binding with uvicorn (which handles signals itself)."""
    import uvicorn

    from shared.transport.http import create_app

    config = uvicorn.Config(create_app(dispatcher), host=host, port=port, log_level="warning")
    server = uvicorn.Server(config)
    logger.info("server_running", service=dispatcher.name, transport="http", host=host, port=port)
    await server.serve()
    logger.info("server_stopped", service=dispatcher.name)


async def serve(adapter: Adapter, settings: Settings, transport: str) -> None:
    async with adapter.open(settings) as dispatcher:
        logger.info("adapter_ready", adapter=adapter.name, tools=len(dispatcher.registry))
        if transport == "http":
            await serve_http(dispatcher, settings.http_host, settings.http_port)
        else:
            await serve_stdio(dispatcher)


def run_adapter(
    adapter: Adapter,
    settings: Settings | None = None,
    transport: str | None = None,
) -> int:
    """Run *adapter* to completion and return the process exit status."""
    try:
        settings = settings or get_settings()
    except ValidationError as e:
        configure_logging()
        logger.error("adapter_startup_failed", adapter=adapter.name, error=str(e))
        return 1

    configure_logging(settings.log_level, settings.log_format)
    transport = transport or settings.transport
    if transport not in TRANSPORTS:
        logger.error("adapter_startup_failed", adapter=adapter.name, error=f"Unknown transport: {transport}")
        return 1

    try:
        asyncio.run(serve(adapter, settings, transport))
    except FatalStartupError as e:
        logger.error("adapter_startup_failed", adapter=adapter.name, error=e.message)
        return 1
    except KeyboardInterrupt:
        logger.info("server_interrupted", adapter=adapter.name)
    except Exception as e:
        logger.error("adapter_crashed", adapter=adapter.name, error=str(e), exc_info=True)
        return 1
    return 0
