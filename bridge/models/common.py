# The module is to define the common models for the bridge server.
# Author: Shibo Li
# Date: 2025-06-11
# Version: 0.2.0

from typing import Annotated, List, Literal

from mcp import types
from pydantic import AfterValidator, AnyUrl, BaseModel, Field, TypeAdapter

_url_adapter = TypeAdapter(AnyUrl)


def _validate_url(value: str) -> str:
    # Validate only. The original string is kept so that no trailing slash is added.
    _url_adapter.validate_python(value)
    return value


UrlStr = Annotated[str, AfterValidator(_validate_url)]


class TextBlock(BaseModel):
    """
    A single unit of tool output.
    Attributes:
        type (str): The kind of the block. Always 'text'.
        text (str): The payload of the block.
    """
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """
    The value every tool returns. Failures are described in the content,
    never raised to the caller.
    """
    content: List[TextBlock] = Field(default_factory=list, description="Ordered content blocks.")

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        return cls(content=[TextBlock(text=text)])

    @property
    def text(self) -> str:
        return "".join(block.text for block in self.content)

    def to_mcp_content(self) -> List[types.TextContent]:
        return [types.TextContent(type="text", text=block.text) for block in self.content]
