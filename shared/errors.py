"""Tagged failure types shared by the dispatcher, transports and adapters.

Every failure carries an :class:`ErrorKind` so callers can branch on the
cause instead of parsing message text:

- ``not_found`` / ``invalid_params``: the request itself was malformed.
- ``capability_failure``: the request was fine but the backing system failed.
- ``fatal``: the adapter cannot start.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_PARAMS = "invalid_params"
    CAPABILITY_FAILURE = "capability_failure"
    FATAL = "fatal"


# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

RPC_CODES: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: METHOD_NOT_FOUND,
    ErrorKind.INVALID_PARAMS: INVALID_PARAMS,
    ErrorKind.CAPABILITY_FAILURE: INTERNAL_ERROR,
    ErrorKind.FATAL: INTERNAL_ERROR,
}


class ToolError(Exception):
    """Base class for all adapter failures."""

    kind: ErrorKind = ErrorKind.CAPABILITY_FAILURE

    def __init__(self, message: str, *, kind: ErrorKind | None = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind

    @property
    def rpc_code(self) -> int:
        return RPC_CODES[self.kind]


class ToolNotFoundError(ToolError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class InvalidParamsError(ToolError):
    kind = ErrorKind.INVALID_PARAMS


class CapabilityError(ToolError):
    """Raised by backing capabilities (non-zero exit, rejected API call, ...)."""

    kind = ErrorKind.CAPABILITY_FAILURE


class FatalStartupError(ToolError):
    """Unrecoverable configuration or handshake failure before serving."""

    kind = ErrorKind.FATAL
