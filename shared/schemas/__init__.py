"""Pydantic schemas for the adapter servers."""

from shared.schemas.common import ErrorResponse, HealthResponse
from shared.schemas.rpc import CallToolParams, RpcError, RpcRequest, RpcResponse, ServerInfo
from shared.schemas.tools import (
    ContentBlock,
    ModuleManifest,
    ToolCall,
    ToolDefinition,
    ToolParameter,
    ToolResult,
)

__all__ = [
    "CallToolParams",
    "ContentBlock",
    "ErrorResponse",
    "HealthResponse",
    "ModuleManifest",
    "RpcError",
    "RpcRequest",
    "RpcResponse",
    "ServerInfo",
    "ToolCall",
    "ToolDefinition",
    "ToolParameter",
    "ToolResult",
]
