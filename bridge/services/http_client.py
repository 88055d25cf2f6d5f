# This module issues single outbound JSON requests and reports the outcome as a value.
# Author: Shibo Li
# Date: 2025-06-20
# Version: 0.1.0

import json
from typing import Any, Dict, Literal, Optional, Union

import httpx
from pydantic import BaseModel

from bridge.utils.logger import console

UNKNOWN_ERROR = "unknown error"


class HttpSuccess(BaseModel):
    """A 2xx response whose body parsed as JSON."""
    kind: Literal["success"] = "success"
    status_code: int
    data: Any = None


class HttpStatusFailure(BaseModel):
    """A non-2xx response. The body is kept as text for best-effort inspection."""
    kind: Literal["status"] = "status"
    status_code: int
    reason: str = ""
    body: str = ""

    def detail(self) -> Any:
        """
        Returns the 'detail' field of a JSON error body, or None when the
        body is not JSON or carries no detail.
        """
        try:
            parsed = json.loads(self.body)
        except ValueError:
            return None
        if isinstance(parsed, dict):
            return parsed.get("detail") or None
        return None


class HttpParseFailure(BaseModel):
    """A 2xx response whose body is not valid JSON."""
    kind: Literal["parse"] = "parse"
    status_code: int
    message: str


class HttpTransportFailure(BaseModel):
    """The request never produced a response (DNS, connection, protocol, encoding)."""
    kind: Literal["transport"] = "transport"
    message: str


HttpOutcome = Union[HttpSuccess, HttpStatusFailure, HttpParseFailure, HttpTransportFailure]


def error_message(exc: BaseException) -> str:
    """The exception's own text, or a generic fallback when it has none."""
    return str(exc) or UNKNOWN_ERROR


async def send_json_request(method: str,
                            url: str,
                            *,
                            headers: Optional[Dict[str, str]] = None,
                            payload: Any = None,
                            timeout: Optional[float] = None,
                            transport: Optional[httpx.AsyncBaseTransport] = None) -> HttpOutcome:
    """
    Sends exactly one request and never raises.

    Args:
        method: The HTTP method, e.g. 'GET' or 'POST'.
        url: The absolute target URL.
        headers: Request headers.
        payload: Serialized as the JSON body when not None.
        timeout: Seconds before giving up. None waits indefinitely.
        transport: Optional httpx transport, used to fake the network in tests.

    Returns:
        One HttpOutcome variant describing what happened.
    """
    request_kwargs: Dict[str, Any] = {"headers": headers or {}}
    if payload is not None:
        request_kwargs["json"] = payload

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.request(method, url, **request_kwargs)
    except httpx.RequestError as e:
        console.error(f"HTTP {method} {url} failed: {e!r}")
        return HttpTransportFailure(message=error_message(e))
    except Exception as e:
        console.exception(f"Unexpected error while sending HTTP {method} {url}")
        return HttpTransportFailure(message=error_message(e))

    if not response.is_success:
        console.warning(f"HTTP {method} {url} returned {response.status_code}.")
        return HttpStatusFailure(
            status_code=response.status_code,
            reason=response.reason_phrase,
            body=response.text,
        )

    try:
        data = response.json()
    except ValueError as e:
        console.error(f"Response from {url} is not valid JSON: {e}")
        return HttpParseFailure(status_code=response.status_code, message=error_message(e))

    return HttpSuccess(status_code=response.status_code, data=data)
