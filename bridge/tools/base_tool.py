# The module is to define the base class for all tools in the bridge server.
# Author: Shibo Li
# Date: 2025-06-11
# Version: 0.2.0

from abc import ABC, abstractmethod
from typing import Any, Dict, Type

from mcp import types
from pydantic import BaseModel, ValidationError

from bridge.models.common import ToolResult


class ToolArgumentError(ValueError):
    """Raised when tool-call arguments do not match the tool's args_schema."""

    def __init__(self, tool_name: str, error: ValidationError):
        self.tool_name = tool_name
        self.errors = error.errors()
        super().__init__(f"Invalid arguments for tool '{tool_name}': {error}")


class BaseTool(ABC):
    """
    Abstract Base Class for all tools.

    This class defines a standard interface that all tools must implement.
    Attributes:
        name (str): The name of the tool, used for identification.
        description (str): A brief description of what the tool does.
        args_schema (Type[BaseModel]): A Pydantic model defining the arguments
            that the tool accepts, which will be validated before execution.
    """
    name: str
    description: str
    args_schema: Type[BaseModel]

    @abstractmethod
    async def execute(self, **kwargs) -> ToolResult:
        """
        The core logic of the tool. This method must be implemented by all subclasses.
        It must not raise: every failure is reported as text in the returned result.

        Args:
            **kwargs: The arguments for the tool, validated against args_schema.

        Returns:
            A ToolResult with the tool's text output.
        """
        pass

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        """
        Validates and coerces raw arguments against args_schema, then executes the tool.
        """
        try:
            validated = self.args_schema.model_validate(arguments or {})
        except ValidationError as e:
            raise ToolArgumentError(self.name, e) from e
        return await self.execute(**dict(validated))

    def get_definition(self) -> types.Tool:
        """
        Returns the tool's definition as advertised to MCP clients.
        """
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.args_schema.model_json_schema(),
        )
