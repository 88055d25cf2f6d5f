# Builds the MCP server that fronts the tool registry.
# Author: Shibo Li
# Date: 2025-06-20
# Version: 0.1.0

from typing import Any, Dict, List

from mcp import types
from mcp.server.lowlevel import Server

from bridge.core.config import Settings
from bridge.core.tool_registry import ToolRegistry
from bridge.utils.logger import console


def build_mcp_server(registry: ToolRegistry, settings: Settings) -> Server:
    """
    Creates a low-level MCP server whose tool list and tool calls are served
    by the given registry. Protocol framing and session handling stay in the SDK.
    """
    server = Server(settings.SERVER_NAME, version=settings.SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return registry.get_definitions()

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        console.info(f"MCP tool call received: '{name}'")
        result = await registry.execute(name, arguments)
        return result.to_mcp_content()

    return server
