"""Tests for the MCP server wiring and the HTTP application routes."""

import socket
import threading
import time
from unittest.mock import patch

import httpx
import pytest
import uvicorn
from fastapi.testclient import TestClient
from mcp import ClientSession
from mcp.client.sse import sse_client
from mcp.client.streamable_http import streamablehttp_client
from mcp.shared.memory import create_connected_server_and_client_session

from bridge.core.mcp_server import build_mcp_server
from bridge.core.tool_registry import ToolRegistry
from bridge.main import create_app
from bridge.tools.add_tool import AddTool
from bridge.tools.calculate_tool import CalculateTool
from bridge.tools.generate_blog_tool import GenerateBlogTool
from bridge.utils.logger import console
from conftest import RecordingTransport, make_settings


def _registry(transport=None) -> ToolRegistry:
    settings = make_settings()
    return ToolRegistry(tools=[
        AddTool(),
        CalculateTool(),
        GenerateBlogTool(settings_provider=lambda: settings, transport=transport),
    ])


class TestMcpServer:
    @pytest.mark.asyncio
    async def test_lists_registry_tools(self):
        server = build_mcp_server(_registry(), make_settings())
        async with create_connected_server_and_client_session(server) as client:
            listed = await client.list_tools()
        assert {tool.name for tool in listed.tools} == {"add", "calculate", "generate_blog"}

    @pytest.mark.asyncio
    async def test_call_returns_text_content(self):
        server = build_mcp_server(_registry(), make_settings())
        async with create_connected_server_and_client_session(server) as client:
            result = await client.call_tool("add", {"a": 2, "b": 3})
        assert not result.isError
        assert result.content[0].type == "text"
        assert result.content[0].text == "5"

    @pytest.mark.asyncio
    async def test_handled_failures_are_not_protocol_errors(self):
        transport = RecordingTransport(lambda request: httpx.Response(200, json={}))
        server = build_mcp_server(_registry(transport), make_settings())
        async with create_connected_server_and_client_session(server) as client:
            divided = await client.call_tool("calculate", {"operation": "divide", "a": 5, "b": 0})
            blog = await client.call_tool("generate_blog", {"keyword": "x"})
        assert not divided.isError
        assert "divide by zero" in divided.content[0].text
        assert not blog.isError
        assert "base URL" in blog.content[0].text
        assert transport.call_count == 0

    @pytest.mark.asyncio
    async def test_invalid_arguments_are_tool_errors(self):
        server = build_mcp_server(_registry(), make_settings())
        async with create_connected_server_and_client_session(server) as client:
            result = await client.call_tool("add", {"a": "two"})
        assert result.isError


class TestRoutes:
    @pytest.fixture
    def client(self):
        app = create_app(settings=make_settings(), registry=_registry())
        with TestClient(app) as client:
            yield client

    def test_health_check(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "MCP Server is alive and running!"}

    def test_unknown_path_is_not_found(self, client):
        assert client.get("/unknown").status_code == 404
        assert client.post("/api/v1/llm/blog/generate").status_code == 404

    def test_transport_paths_are_routed(self, client):
        paths = {getattr(route, "path", None) for route in client.app.routes}
        assert "/sse" in paths
        assert "/sse/message" in paths
        assert "/mcp" in paths

    def test_streamable_http_endpoint_is_served(self, client):
        response = client.post("/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "ping"})
        assert response.status_code != 404

    def test_sse_message_path_needs_no_trailing_slash(self, client):
        response = client.post("/sse/message", json={}, follow_redirects=False)
        assert response.status_code == 400

    def test_startup_banner(self):
        app = create_app(settings=make_settings(), registry=_registry())
        with patch.object(console, "rule") as rule:
            with TestClient(app):
                pass
        rule.assert_called_once_with("Authless Calculator 1.0.0")


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def live_server():
    """Serves a fresh app with uvicorn on a background thread."""
    app = create_app(settings=make_settings(), registry=_registry())
    port = _free_port()
    server = uvicorn.Server(uvicorn.Config(
        app, host="127.0.0.1", port=port, log_level="warning", timeout_graceful_shutdown=2,
    ))
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline:
            raise RuntimeError("uvicorn did not start")
        time.sleep(0.05)

    yield f"http://127.0.0.1:{port}"

    server.should_exit = True
    thread.join(timeout=10)


class TestLiveTransports:
    """End-to-end handshakes with the SDK clients over real sockets."""

    @pytest.mark.asyncio
    async def test_sse_handshake_and_tool_call(self, live_server):
        async with sse_client(f"{live_server}/sse") as (read_stream, write_stream):
            async with ClientSession(read_stream, write_stream) as session:
                initialized = await session.initialize()
                listed = await session.list_tools()
                result = await session.call_tool("calculate", {"operation": "multiply", "a": 3, "b": 4})

        assert initialized.serverInfo.name == "Authless Calculator"
        assert {tool.name for tool in listed.tools} == {"add", "calculate", "generate_blog"}
        assert not result.isError
        assert result.content[0].text == "12"

    @pytest.mark.asyncio
    async def test_streamable_http_handshake_and_tool_call(self, live_server):
        async with streamablehttp_client(f"{live_server}/mcp") as (read_stream, write_stream, _):
            async with ClientSession(read_stream, write_stream) as session:
                await session.initialize()
                result = await session.call_tool("add", {"a": 2, "b": 3})

        assert not result.isError
        assert result.content[0].text == "5"
