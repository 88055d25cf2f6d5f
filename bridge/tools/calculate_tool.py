# A four-operation calculator tool.
# Author: Shibo Li
# Date: 2025-06-20
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Literal, Type
from .base_tool import BaseTool
from bridge.models.common import ToolResult
from bridge.utils.logger import console
from bridge.utils.numbers import format_number

Operation = Literal["add", "subtract", "multiply", "divide"]

ZERO_DIVISION_MESSAGE = "Error: cannot divide by zero"

class CalculateInput(BaseModel):
    """
    Input model for the Calculate tool.
    Attributes:
        operation (str): One of add, subtract, multiply, divide.
        a (float): The first operand.
        b (float): The second operand.
    """
    operation: Operation = Field(..., description="The operation to perform.")
    a: float = Field(..., description="The first operand.")
    b: float = Field(..., description="The second operand.")

class CalculateTool(BaseTool):
    """
    Performs addition, subtraction, multiplication or division on two numbers.
    Division by zero is reported as a text result, not as a failure.
    """
    name: str = "calculate"
    description: str = "Performs add, subtract, multiply or divide on two numbers."
    args_schema: Type[BaseModel] = CalculateInput

    async def execute(self, operation: Operation, a: float, b: float) -> ToolResult:
        console.info(f"Executing tool '{self.name}': {operation}({a}, {b})")

        if operation == "add":
            result = a + b
        elif operation == "subtract":
            result = a - b
        elif operation == "multiply":
            result = a * b
        else:
            if b == 0:
                console.warning("Division by zero requested.")
                return ToolResult.from_text(ZERO_DIVISION_MESSAGE)
            result = a / b

        return ToolResult.from_text(format_number(result))
