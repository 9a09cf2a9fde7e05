from __future__ import annotations

import logging
import sys
from typing import Any, Dict, List

import anyio
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from .api_client import VpsNetClient
from .config import Settings, get_settings
from .errors import ToolError
from .instructions import INSTRUCTIONS, SERVER_NAME, SERVER_VERSION
from .logging_config import configure_logging
from .tools import ToolRegistry, format_json
from .tools import (
    account_tools,
    backup_tools,
    history_tools,
    key_tools,
    order_tools,
    plan_tools,
    public_tools,
    service_tools,
    settings_tools,
)

logger = logging.getLogger(__name__)


def create_registry(client: VpsNetClient) -> ToolRegistry:
    """Build the registry holding every VPSnet tool."""
    registry = ToolRegistry(client)

    # Register tool groups
    account_tools.register_tools(registry)
    service_tools.register_tools(registry)
    settings_tools.register_tools(registry)
    plan_tools.register_tools(registry)
    order_tools.register_tools(registry)
    backup_tools.register_tools(registry)
    key_tools.register_tools(registry)
    history_tools.register_tools(registry)
    public_tools.register_tools(registry)

    return registry


def create_server(registry: ToolRegistry) -> Server:
    """
    Create and configure the MCP server on top of a populated registry.
    """
    server = Server(SERVER_NAME, version=SERVER_VERSION, instructions=INSTRUCTIONS)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return registry.list_tools()

    @server.call_tool()
    async def call_tool(
        name: str,
        arguments: Dict[str, Any],
    ) -> List[types.TextContent]:
        # A raised ToolError is turned into an isError result by the server.
        try:
            response = await registry.dispatch(name, arguments)
        except ToolError as exc:
            logger.warning("Tool '%s' failed: %s", name, exc)
            raise
        return [types.TextContent(type="text", text=format_json(response.data))]

    return server


async def run_stdio_server(settings: Settings) -> None:
    async with VpsNetClient(settings.upstream(), timeout=settings.timeout) as client:
        server = create_server(create_registry(client))
        logger.info("VPSnet MCP server running on stdio (%s)", settings.api_url)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )


def main() -> None:
    """
    Entrypoint for running the MCP server.

    Supports two transport modes:
    - stdio: For direct process-to-process communication (default)
    - http: For HTTP/SSE transport behind reverse proxy
    """
    configure_logging()
    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.error("Invalid configuration: %s", exc)
        sys.exit(1)
    configure_logging(settings.log_level)

    if settings.transport == "http":
        from .http_server import run_http_server

        anyio.run(run_http_server, settings)
    else:
        anyio.run(run_stdio_server, settings)


if __name__ == "__main__":
    main()
