"""Unit tests for the add and calculate tools."""

import math

import pytest

from bridge.tools.add_tool import AddTool
from bridge.tools.base_tool import ToolArgumentError
from bridge.tools.calculate_tool import ZERO_DIVISION_MESSAGE, CalculateTool
from bridge.utils.numbers import format_number


class TestFormatNumber:
    def test_integral_float_has_no_fraction(self):
        assert format_number(5.0) == "5"
        assert format_number(-0.0) == "0"

    def test_fractional_float(self):
        assert format_number(0.5) == "0.5"
        assert format_number(0.1 + 0.2) == "0.30000000000000004"

    def test_int(self):
        assert format_number(12) == "12"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1e-7, "1e-7"),
            (-1.2345e-8, "-1.2345e-8"),
            (0.000001, "0.000001"),
            (123.456, "123.456"),
            (1.5e16, "15000000000000000"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
            (2.5e22, "2.5e+22"),
        ],
    )
    def test_exponent_thresholds(self, value, expected):
        assert format_number(value) == expected

    def test_non_finite(self):
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"
        assert format_number(math.nan) == "NaN"


class TestAddTool:
    @pytest.mark.asyncio
    async def test_add(self):
        result = await AddTool().run({"a": 2, "b": 3})
        assert result.text == "5"
        assert len(result.content) == 1
        assert result.content[0].type == "text"

    @pytest.mark.asyncio
    async def test_add_negative(self):
        result = await AddTool().run({"a": -1, "b": 1})
        assert result.text == "0"

    @pytest.mark.asyncio
    async def test_add_fractions(self):
        result = await AddTool().run({"a": 1.5, "b": 1})
        assert result.text == "2.5"

    @pytest.mark.asyncio
    async def test_non_numeric_rejected_before_execution(self):
        with pytest.raises(ToolArgumentError):
            await AddTool().run({"a": "two", "b": 3})

    @pytest.mark.asyncio
    async def test_missing_argument_rejected(self):
        with pytest.raises(ToolArgumentError, match="add"):
            await AddTool().run({"a": 1})


class TestCalculateTool:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "operation, a, b, expected",
        [
            ("add", 2, 3, "5"),
            ("subtract", 2, 3, "-1"),
            ("multiply", 3, 4, "12"),
            ("divide", 1, 2, "0.5"),
            ("divide", 9, 3, "3"),
        ],
    )
    async def test_operations(self, operation, a, b, expected):
        result = await CalculateTool().run({"operation": operation, "a": a, "b": b})
        assert result.text == expected

    @pytest.mark.asyncio
    async def test_divide_by_zero_is_a_text_result(self):
        result = await CalculateTool().run({"operation": "divide", "a": 5, "b": 0})
        assert result.text == ZERO_DIVISION_MESSAGE
        assert "divide by zero" in result.text

    @pytest.mark.asyncio
    async def test_zero_numerator_divides(self):
        result = await CalculateTool().run({"operation": "divide", "a": 0, "b": 5})
        assert result.text == "0"

    @pytest.mark.asyncio
    async def test_unknown_operation_rejected(self):
        with pytest.raises(ToolArgumentError):
            await CalculateTool().run({"operation": "power", "a": 2, "b": 3})

    @pytest.mark.asyncio
    async def test_tiny_quotient_uses_compact_exponent(self):
        result = await CalculateTool().run({"operation": "divide", "a": 1, "b": 10000000})
        assert result.text == "1e-7"
