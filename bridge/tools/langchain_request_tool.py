# A tool that forwards a request to an external FastAPI/LangChain server.
# Author: Shibo Li
# Date: 2025-06-20
# Version: 0.1.0

import json
import httpx
from pydantic import BaseModel, Field
from typing import Any, Callable, Dict, Literal, Optional, Type
from .base_tool import BaseTool
from bridge.core.config import Settings, get_settings
from bridge.models.common import ToolResult, UrlStr
from bridge.services.http_client import (
    HttpParseFailure,
    HttpStatusFailure,
    HttpSuccess,
    HttpTransportFailure,
    send_json_request,
)
from bridge.utils.json_values import is_truthy
from bridge.utils.logger import console

DEFAULT_HEADERS = {"Content-Type": "application/json"}

class LangchainRequestInput(BaseModel):
    """
    Input model for the LangChain request tool.
    Attributes:
        endpoint (str): The full URL of the FastAPI endpoint.
        method (str): GET or POST.
        payload (Any): JSON body, sent only with POST.
        headers (Dict[str, str]): Extra headers merged over the JSON content type.
    """
    endpoint: UrlStr = Field(..., description="The URL of the FastAPI server endpoint.")
    method: Literal["GET", "POST"] = Field(default="POST", description="The HTTP method.")
    payload: Optional[Any] = Field(default=None, description="Request payload, sent as JSON for POST requests.")
    headers: Optional[Dict[str, str]] = Field(default=None, description="Additional request headers.")

class LangchainRequestTool(BaseTool):
    """
    A generic proxy to a FastAPI server running LangChain. The JSON response is
    returned pretty-printed; any failure is returned as an error message.
    """
    name: str = "langchain_request"
    description: str = "Sends a request to an external FastAPI server running LangChain " \
    "and returns its JSON response."
    args_schema: Type[BaseModel] = LangchainRequestInput

    def __init__(self,
                 settings_provider: Callable[[], Settings] = get_settings,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__()
        self._settings_provider = settings_provider
        self._transport = transport

    async def execute(self,
                      endpoint: str,
                      method: str = "POST",
                      payload: Any = None,
                      headers: Optional[Dict[str, str]] = None) -> ToolResult:
        console.info(f"Executing tool '{self.name}': {method} {endpoint}")

        request_headers = {**DEFAULT_HEADERS, **(headers or {})}
        # Falsy payloads (null, false, 0, "") are not sent. Empty objects and arrays are.
        body = payload if method == "POST" and is_truthy(payload) else None

        outcome = await send_json_request(
            method,
            endpoint,
            headers=request_headers,
            payload=body,
            timeout=self._settings_provider().HTTP_TIMEOUT,
            transport=self._transport,
        )

        if isinstance(outcome, HttpSuccess):
            console.success(f"Tool '{self.name}' executed successfully.")
            return ToolResult.from_text(json.dumps(outcome.data, indent=2, ensure_ascii=False))
        if isinstance(outcome, HttpStatusFailure):
            return ToolResult.from_text(f"Error: HTTP {outcome.status_code} - {outcome.reason}")
        if isinstance(outcome, (HttpParseFailure, HttpTransportFailure)):
            return ToolResult.from_text(f"Error: {outcome.message}")
        raise TypeError(f"Unhandled HTTP outcome: {outcome!r}")
