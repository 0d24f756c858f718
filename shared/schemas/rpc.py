"""JSON-RPC 2.0 message schemas for the line-delimited stdio channel."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

PROTOCOL_VERSION = "2024-11-05"


class RpcRequest(BaseModel):
    """A request or notification read from the channel."""

    model_config = ConfigDict(extra="ignore")

    jsonrpc: Literal["2.0"]
    id: int | str | None = None
    method: str
    params: dict[str, Any] = Field(default_factory=dict)

    @field_validator("params", mode="before")
    @classmethod
    def _none_params(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def is_notification(self) -> bool:
        # A request with an explicit ``"id": null`` still expects a reply.
        return "id" not in self.model_fields_set


class RpcError(BaseModel):
    code: int
    message: str
    data: Any = None


class RpcResponse(BaseModel):
    """A response written back to the channel."""

    id: int | str | None
    result: dict[str, Any] | None = None
    error: RpcError | None = None

    def to_wire(self) -> dict[str, Any]:
        msg: dict[str, Any] = {"jsonrpc": "2.0", "id": self.id}
        if self.error is not None:
            msg["error"] = self.error.model_dump(exclude_none=True)
        else:
            msg["result"] = self.result if self.result is not None else {}
        return msg


class CallToolParams(BaseModel):
    """Parameters of a ``tools/call`` request."""

    model_config = ConfigDict(extra="ignore")

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def _none_arguments(cls, v: Any) -> Any:
        return {} if v is None else v


class ServerInfo(BaseModel):
    name: str
    version: str
