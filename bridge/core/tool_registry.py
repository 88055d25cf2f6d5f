# Discovers and manages all available tools automatically.
# Version 0.2.0: Tools return ToolResult and are dispatched by name from MCP calls.

import importlib
import inspect
import pkgutil
from typing import Any, Dict, Iterable, List, Optional

from mcp import types

from bridge import tools as tools_package
from bridge.models.common import ToolResult
from bridge.tools.base_tool import BaseTool
from bridge.utils.logger import console

class ToolRegistry:
    """
    A class to discover, register, and dispatch tools by name.
    """
    def __init__(self, tools: Optional[Iterable[BaseTool]] = None):
        self.tools: Dict[str, BaseTool] = {}
        if tools is None:
            self._discover_tools()
        else:
            for tool in tools:
                self.register(tool)
        console.success(f"Tool registry ready. Found {len(self.tools)} tools: {list(self.tools.keys())}")

    def _discover_tools(self):
        """
        Scans the bridge.tools package, imports all modules, finds classes that
        inherit from BaseTool, and creates an instance of each to register.
        """
        for _, modname, _ in pkgutil.iter_modules(tools_package.__path__, f"{tools_package.__name__}."):
            if modname == f"{tools_package.__name__}.base_tool":
                continue
            try:
                module = importlib.import_module(modname)
            except Exception as e:
                console.error(f"Failed to load tool module {modname}: {e}")
                continue
            for _, obj in inspect.getmembers(module, inspect.isclass):
                if issubclass(obj, BaseTool) and obj is not BaseTool and obj.__module__ == module.__name__:
                    self.register(obj())

    def register(self, tool: BaseTool):
        """Adds a tool. Tool names are unique."""
        if tool.name in self.tools:
            raise ValueError(f"Tool '{tool.name}' is already registered.")
        self.tools[tool.name] = tool
        console.info(f"Successfully registered tool: '{tool.name}'")

    def get_definitions(self) -> List[types.Tool]:
        """Returns the list of all tool definitions for MCP clients."""
        return [tool.get_definition() for tool in self.tools.values()]

    async def execute(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Validates the arguments and executes a tool by its name.
        """
        if tool_name not in self.tools:
            console.error(f"Attempted to execute unknown tool: {tool_name}")
            raise ValueError(f"Tool '{tool_name}' not found.")
        return await self.tools[tool_name].run(arguments or {})
