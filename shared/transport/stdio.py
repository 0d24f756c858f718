"""Line-delimited JSON-RPC binding over stdin/stdout.

One JSON object per line in each direction. Supported methods:

- ``initialize``: handshake, must come first
- ``notifications/initialized``: acknowledged silently
- ``tools/list``: full catalog
- ``tools/call``: one invocation, answered with a result envelope

Tool calls run in their own tasks so slow backing calls can overlap; each
response line is written under a lock so lines never interleave.
"""

from __future__ import annotations

import asyncio
import json
import sys
from typing import Any, Protocol

import structlog
from pydantic import ValidationError

from shared.dispatcher import Dispatcher
from shared.errors import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    ToolError,
)
from shared.schemas.rpc import PROTOCOL_VERSION, CallToolParams, RpcError, RpcRequest, RpcResponse

logger = structlog.get_logger()

STREAM_LIMIT = 16 * 1024 * 1024  # max bytes per line


class LineReader(Protocol):
    async def readuntil(self, separator: bytes = b"\n") -> bytes: ...

    async def readexactly(self, n: int) -> bytes: ...


class LineWriter(Protocol):
    def write(self, data: bytes) -> None: ...

    async def drain(self) -> None: ...


class RpcFailure(Exception):
    """Protocol-level failure that is not tied to a tool."""

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


def _error(request_id: Any, code: int, message: str) -> dict[str, Any]:
    return RpcResponse(id=request_id, error=RpcError(code=code, message=message)).to_wire()


async def read_message(reader: LineReader) -> bytes | None:
    """Read one line. Returns b"" at EOF and None for a line over the stream limit.

    An oversized line is consumed up to and including its newline, however
    many chunks it arrives in, so it is reported exactly once.
    """
    try:
        return await reader.readuntil(b"\n")
    except asyncio.IncompleteReadError as e:
        return e.partial
    except asyncio.LimitOverrunError as e:
        overrun = e

    while True:
        await reader.readexactly(overrun.consumed)
        try:
            await reader.readuntil(b"\n")
            return None
        except asyncio.IncompleteReadError:
            return None
        except asyncio.LimitOverrunError as e:
            overrun = e


async def open_stdio(limit: int = STREAM_LIMIT) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
    """Wrap the process's stdin/stdout in asyncio streams."""
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader(limit=limit)
    await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(reader), sys.stdin)
    w_transport, w_protocol = await loop.connect_write_pipe(
        asyncio.streams.FlowControlMixin, sys.stdout
    )
    writer = asyncio.StreamWriter(w_transport, w_protocol, reader, loop)
    return reader, writer


class StdioTransport:
    """Serves one Dispatcher to one client over a duplex line stream."""

    def __init__(self, dispatcher: Dispatcher):
        self.dispatcher = dispatcher
        self.initialized = False
        self._write_lock = asyncio.Lock()
        self._tasks: set[asyncio.Task] = set()

    # ------------------------------------------------------------------
    # Message handling
    # ------------------------------------------------------------------

    def parse(self, raw: str | bytes) -> RpcRequest | dict[str, Any]:
        """Decode one line into a request, or an error response to send back."""
        try:
            payload = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("rpc_parse_error", error=str(e))
            return _error(None, PARSE_ERROR, "Parse error")

        if not isinstance(payload, dict):
            return _error(None, INVALID_REQUEST, "Request must be a JSON object")
        try:
            return RpcRequest.model_validate(payload)
        except ValidationError:
            request_id = payload.get("id")
            if not isinstance(request_id, (int, str)):
                request_id = None
            return _error(request_id, INVALID_REQUEST, "Invalid request")

    async def handle_request(self, request: RpcRequest) -> dict[str, Any] | None:
        """Route one request. Returns the response message, or None for notifications."""
        if request.is_notification:
            logger.debug("rpc_notification", method=request.method)
            return None

        try:
            result = await self._route(request)
        except ToolError as e:
            return _error(request.id, e.rpc_code, e.message)
        except RpcFailure as e:
            return _error(request.id, e.code, e.message)
        except Exception as e:
            logger.error("rpc_handler_error", method=request.method, error=str(e), exc_info=True)
            return _error(request.id, INTERNAL_ERROR, f"Internal error: {e}")
        return RpcResponse(id=request.id, result=result).to_wire()

    async def handle_line(self, raw: str | bytes) -> dict[str, Any] | None:
        parsed = self.parse(raw)
        if isinstance(parsed, dict):
            return parsed
        return await self.handle_request(parsed)

    async def _route(self, request: RpcRequest) -> dict[str, Any]:
        if request.method == "initialize":
            return self._initialize(request.params)

        if not self.initialized:
            raise RpcFailure(INVALID_REQUEST, "Server not initialized")

        if request.method == "tools/list":
            tools = await self.dispatcher.list_tools()
            return {"tools": [tool.to_wire() for tool in tools]}

        if request.method == "tools/call":
            try:
                params = CallToolParams.model_validate(request.params)
            except ValidationError as e:
                error = e.errors()[0]
                field = ".".join(str(part) for part in error["loc"]) or "params"
                raise RpcFailure(
                    INVALID_PARAMS, f"Invalid tools/call params '{field}': {error['msg']}"
                ) from e
            result = await self.dispatcher.invoke(params.name, params.arguments)
            return result.model_dump(by_alias=True)

        raise RpcFailure(METHOD_NOT_FOUND, f"Method not found: {request.method}")

    def _initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        requested = params.get("protocolVersion")
        client = params.get("clientInfo") or {}
        self.initialized = True
        logger.info(
            "client_initialized",
            client=client.get("name") if isinstance(client, dict) else None,
            protocol=requested,
        )
        return {
            "protocolVersion": requested if isinstance(requested, str) else PROTOCOL_VERSION,
            "capabilities": {"tools": {"listChanged": self.dispatcher.registry.dynamic}},
            "serverInfo": self.dispatcher.server_info.model_dump(),
        }

    # ------------------------------------------------------------------
    # Channel loop
    # ------------------------------------------------------------------

    async def _send(self, writer: LineWriter, message: dict[str, Any]) -> None:
        data = json.dumps(message, ensure_ascii=False, separators=(",", ":"), default=str) + "\n"
        async with self._write_lock:
            writer.write(data.encode("utf-8"))
            await writer.drain()

    async def _respond(self, request: RpcRequest, writer: LineWriter) -> None:
        response = await self.handle_request(request)
        if response is not None:
            await self._send(writer, response)

    def _spawn(self, coro) -> None:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _process_line(self, raw: bytes, writer: LineWriter) -> None:
        parsed = self.parse(raw)
        if isinstance(parsed, dict):
            await self._send(writer, parsed)
            return
        if parsed.method == "tools/call" and self.initialized and not parsed.is_notification:
            self._spawn(self._respond(parsed, writer))
        else:
            await self._respond(parsed, writer)

    async def serve(
        self,
        reader: LineReader,
        writer: LineWriter,
        stop: asyncio.Event | None = None,
    ) -> None:
        """Read requests until EOF or until *stop* is set."""
        stop = stop or asyncio.Event()
        stop_wait = asyncio.ensure_future(stop.wait())
        try:
            while True:
                read = asyncio.ensure_future(read_message(reader))
                done, _ = await asyncio.wait(
                    {read, stop_wait}, return_when=asyncio.FIRST_COMPLETED
                )
                if read not in done:
                    read.cancel()
                    logger.info("transport_stop_requested")
                    break

                line = read.result()
                if line is None:
                    logger.warning("rpc_line_too_long")
                    await self._send(writer, _error(None, INVALID_REQUEST, "Message too large"))
                    continue

                if not line:
                    logger.info("transport_eof")
                    break
                if not line.strip():
                    continue
                await self._process_line(line, writer)
        finally:
            stop_wait.cancel()
            await self._finish_in_flight(stop)

    async def _finish_in_flight(self, stop: asyncio.Event) -> None:
        """Let pending calls answer after EOF; abandon them once stop is set."""
        while self._tasks and not stop.is_set():
            stop_wait = asyncio.ensure_future(stop.wait())
            await asyncio.wait({*self._tasks, stop_wait}, return_when=asyncio.FIRST_COMPLETED)
            stop_wait.cancel()
        await self._abandon_in_flight()

    async def _abandon_in_flight(self) -> None:
        if not self._tasks:
            return
        logger.info("abandoning_in_flight_calls", count=len(self._tasks))
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
