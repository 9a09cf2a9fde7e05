from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response, StreamingResponse

from .api_client import VpsNetClient
from .config import Settings
from .instructions import INSTRUCTIONS, SERVER_NAME, SERVER_VERSION
from .main import create_registry
from .tools import ToolRegistry

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


def _rpc_error(message_id: Any, code: int, message: str) -> Dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "id": message_id,
        "error": {"code": code, "message": message},
    }


def _rpc_result(message_id: Any, result: Dict[str, Any]) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": message_id, "result": result}


def create_http_app(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Create FastAPI app that serves the VPSnet tools over HTTP/SSE.

    MCP over HTTP/SSE:
    - Client sends POST requests with JSON-RPC messages in body
    - Server responds with SSE stream containing JSON-RPC responses
    - Each SSE event format: "data: <json-rpc-response>\\n\\n"

    `transport` replaces the network transport of the upstream client.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        client = VpsNetClient(
            settings.upstream(),
            timeout=settings.timeout,
            transport=transport,
        )
        app.state.registry = create_registry(client)
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(
        title="VPSnet MCP Server",
        version=SERVER_VERSION,
        description="MCP tools for managing VPS services on VPSnet.com",
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "ok", "service": SERVER_NAME}

    @app.get("/")
    async def root():
        """Root endpoint with service info."""
        return {
            "service": SERVER_NAME,
            "version": SERVER_VERSION,
            "protocol": "mcp",
            "transport": "http/sse",
            "endpoints": {
                "health": "/health",
                "mcp_stream": "/mcp/stream",
            },
        }

    @app.post("/mcp/stream")
    async def mcp_stream(request: Request):
        """
        MCP SSE stream endpoint.

        Supported MCP methods: initialize, ping, tools/list, tools/call.
        Notifications (messages without an id) are acknowledged with 202.
        """
        body = await request.body()
        if not body:
            return JSONResponse(
                _rpc_error(None, INVALID_REQUEST, "Invalid Request: empty body"),
                status_code=400,
            )
        try:
            message = json.loads(body)
        except json.JSONDecodeError as e:
            return JSONResponse(
                _rpc_error(None, PARSE_ERROR, f"Parse error: {e}"),
                status_code=400,
            )

        if not isinstance(message, dict) or message.get("jsonrpc") != "2.0":
            message_id = message.get("id") if isinstance(message, dict) else None
            return JSONResponse(
                _rpc_error(message_id, INVALID_REQUEST, "Invalid Request: jsonrpc must be '2.0'"),
                status_code=400,
            )

        method = message.get("method")
        message_id = message.get("id")
        params = message.get("params") or {}

        if not method:
            return JSONResponse(
                _rpc_error(message_id, INVALID_REQUEST, "Invalid Request: method is required"),
                status_code=400,
            )
        if "id" not in message:
            return Response(status_code=202)

        registry: ToolRegistry = request.app.state.registry

        async def generate_sse() -> AsyncIterator[str]:
            try:
                response = await handle_mcp_request(registry, method, params, message_id)
            except Exception as e:
                logger.exception("Error handling MCP method %s", method)
                response = _rpc_error(message_id, INTERNAL_ERROR, f"Internal error: {e}")
            yield f"data: {json.dumps(response)}\n\n"

        return StreamingResponse(
            generate_sse(),
            media_type="text/event-stream",
            headers={
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
                "X-Accel-Buffering": "no",  # Disable nginx buffering
            },
        )

    return app


async def handle_mcp_request(
    registry: ToolRegistry,
    method: str,
    params: Dict[str, Any],
    message_id: Any,
) -> Dict[str, Any]:
    """
    Handle one JSON-RPC request and return the JSON-RPC response object.
    """
    if method == "initialize":
        return _rpc_result(
            message_id,
            {
                "protocolVersion": params.get("protocolVersion", PROTOCOL_VERSION),
                "capabilities": {"tools": {"listChanged": False}},
                "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
                "instructions": INSTRUCTIONS,
            },
        )

    if method == "ping":
        return _rpc_result(message_id, {})

    if method == "tools/list":
        tools = registry.list_tools()
        return _rpc_result(
            message_id,
            {"tools": [tool.model_dump(exclude_none=True) for tool in tools]},
        )

    if method == "tools/call":
        tool_name = params.get("name")
        if not tool_name:
            return _rpc_error(message_id, INVALID_PARAMS, "Invalid params: 'name' is required")

        # Unknown tools and bad arguments come back as isError tool results.
        result = await registry.invoke(tool_name, params.get("arguments"))
        return _rpc_result(message_id, result.model_dump(exclude_none=True))

    return _rpc_error(message_id, METHOD_NOT_FOUND, f"Method not found: {method}")


async def run_http_server(settings: Settings) -> None:
    """Run the HTTP server using uvicorn."""
    import uvicorn

    app = create_http_app(settings)
    config = uvicorn.Config(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
        access_log=True,
    )
    server = uvicorn.Server(config)
    await server.serve()
