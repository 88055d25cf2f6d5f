# A tool that adds two numbers.
# Author: Shibo Li
# Date: 2025-06-20
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Type
from .base_tool import BaseTool
from bridge.models.common import ToolResult
from bridge.utils.logger import console
from bridge.utils.numbers import format_number

class AddInput(BaseModel):
    """Input model for the Add tool."""
    a: float = Field(..., description="The first number.")
    b: float = Field(..., description="The second number.")

class AddTool(BaseTool):
    """Returns the sum of two numbers."""
    name: str = "add"
    description: str = "Adds two numbers and returns the sum."
    args_schema: Type[BaseModel] = AddInput

    async def execute(self, a: float, b: float) -> ToolResult:
        console.info(f"Executing tool '{self.name}' with a={a}, b={b}")
        return ToolResult.from_text(format_number(a + b))
