"""End-to-end tests through an in-memory MCP client session."""

import json

import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from vpsnet_mcp.instructions import INSTRUCTIONS, SERVER_NAME
from vpsnet_mcp.main import create_server


def test_server_identity(registry):
    server = create_server(registry)
    options = server.create_initialization_options()

    assert server.name == SERVER_NAME
    assert options.instructions == INSTRUCTIONS
    assert "sshKey" in INSTRUCTIONS and "ssh_key" in INSTRUCTIONS


@pytest.mark.asyncio
async def test_session_lists_all_tools(registry):
    async with create_connected_server_and_client_session(create_server(registry)) as session:
        result = await session.list_tools()

    assert len(result.tools) == 49
    assert "order_service" in {tool.name for tool in result.tools}


@pytest.mark.asyncio
async def test_session_call_tool_returns_indented_json(registry, upstream):
    upstream.respond_json({"status": "operational"})

    async with create_connected_server_and_client_session(create_server(registry)) as session:
        result = await session.call_tool("get_system_status", {})

    assert not result.isError
    assert result.content[0].text == json.dumps({"status": "operational"}, indent=2)
    assert upstream.last.url.path == "/public/status"


@pytest.mark.asyncio
async def test_session_call_unknown_tool_is_error(registry, upstream):
    async with create_connected_server_and_client_session(create_server(registry)) as session:
        result = await session.call_tool("format_disk", {})

    assert result.isError
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_session_invalid_arguments_is_error(registry, upstream):
    async with create_connected_server_and_client_session(create_server(registry)) as session:
        result = await session.call_tool(
            "toggle_extra_settings", {"orderNo": "VP1", "name": "kvm", "value": True}
        )

    assert result.isError
    assert upstream.requests == []
