"""HTTP binding - exposes a Dispatcher as a FastAPI service.

Endpoints mirror the stdio methods: ``GET /manifest`` lists the catalog,
``POST /execute`` runs one tool call, ``GET /health`` is a liveness probe.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shared.dispatcher import Dispatcher
from shared.errors import ErrorKind, ToolError
from shared.schemas.common import ErrorResponse, HealthResponse
from shared.schemas.tools import ModuleManifest, ToolCall, ToolResult

_STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_PARAMS: 422,
}


def create_app(dispatcher: Dispatcher) -> FastAPI:
    """Build a FastAPI app serving *dispatcher*."""
    app = FastAPI(title=dispatcher.name, version=dispatcher.version)
    app.state.dispatcher = dispatcher

    @app.exception_handler(ToolError)
    async def tool_error_handler(request: Request, exc: ToolError):
        body = ErrorResponse(kind=exc.kind.value, detail=exc.message)
        return JSONResponse(status_code=_STATUS_CODES.get(exc.kind, 500), content=body.model_dump())

    @app.get("/manifest", response_model=ModuleManifest)
    async def manifest():
        """Return the module manifest with the current catalog."""
        return await dispatcher.manifest()

    @app.post("/execute", response_model=ToolResult)
    async def execute(call: ToolCall):
        """Execute a tool call."""
        return await dispatcher.invoke(call.tool_name, call.arguments)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="ok")

    return app
