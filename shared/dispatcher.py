"""Dispatcher - validates tool calls, runs the handler and wraps the outcome."""

from __future__ import annotations

from typing import Any

import structlog

from shared.errors import InvalidParamsError, ToolError
from shared.registry import ToolRegistry
from shared.schemas.rpc import ServerInfo
from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolResult
from shared.serialization import render_text

logger = structlog.get_logger()


def describe_failure(error: BaseException) -> str:
    """Human-readable cause for an exception raised by a backing capability."""
    if isinstance(error, ToolError):
        return error.message
    message = str(error)
    return message or type(error).__name__


class Dispatcher:
    """Routes one invocation to one handler and returns exactly one ToolResult.

    Failures about the request shape (unknown tool, bad arguments) are raised
    as :class:`~shared.errors.ToolError` when ``protocol_errors`` is set, so
    the transport can report them as protocol errors; otherwise they come
    back as ``isError`` envelopes. Anything raised by the handler itself is
    always returned as an ``isError`` envelope.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        *,
        name: str,
        version: str = "0.1.0",
        description: str = "",
        protocol_errors: bool = True,
        error_prefix: str = "",
    ):
        self.registry = registry
        self.name = name
        self.version = version
        self.description = description
        self.protocol_errors = protocol_errors
        self.error_prefix = error_prefix

    @property
    def server_info(self) -> ServerInfo:
        return ServerInfo(name=self.name, version=self.version)

    async def list_tools(self) -> list[ToolDefinition]:
        return await self.registry.list_tools()

    async def manifest(self) -> ModuleManifest:
        return ModuleManifest(
            module_name=self.name,
            description=self.description,
            version=self.version,
            tools=await self.list_tools(),
        )

    async def invoke(self, tool_name: str, arguments: dict[str, Any] | None) -> ToolResult:
        """Execute a tool call."""
        log = logger.bind(service=self.name, tool=tool_name)

        try:
            entry = self.registry.get(tool_name)
            args = entry.validator.validate(arguments)
        except ToolError as e:
            return self._reject(log, e)

        try:
            result = await entry.handler(**args)
        except InvalidParamsError as e:
            # Argument constraints the schema cannot express, checked by the handler.
            return self._reject(log, e)
        except Exception as e:
            log.error("tool_execution_error", error=str(e), exc_info=True)
            return ToolResult.failure(f"{self.error_prefix}{describe_failure(e)}")

        log.info("tool_executed")
        return ToolResult.ok(render_text(result))

    def _reject(self, log, error: ToolError) -> ToolResult:
        log.warning("tool_call_rejected", kind=error.kind.value, error=error.message)
        if self.protocol_errors:
            raise error
        return ToolResult.failure(error.message, error.kind)
