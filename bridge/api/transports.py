# The module is to define the two MCP transport endpoints of the bridge server.
# Author: Shibo Li
# Date: 2025-06-20
# Version: 0.1.0

from typing import Awaitable, Callable, List, Tuple

from mcp.server.lowlevel import Server
from mcp.server.sse import SseServerTransport
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import BaseRoute, Route
from starlette.types import Receive, Scope, Send

from bridge.utils.logger import console

SSE_PATH = "/sse"
SSE_MESSAGE_PATH = "/sse/message"
STREAMABLE_HTTP_PATH = "/mcp"


class ASGIEndpoint:
    """Wraps a raw ASGI handler so a Route passes it scope, receive and send untouched."""

    def __init__(self, handler: Callable[[Scope, Receive, Send], Awaitable[None]]):
        self.handler = handler

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.handler(scope, receive, send)


def build_transport_routes(server: Server) -> Tuple[List[BaseRoute], StreamableHTTPSessionManager]:
    """
    Creates the routes for both transports.

    Returns:
        The routes to add to the application, and the streamable HTTP session
        manager, which must be run inside the application lifespan.
    """
    sse = SseServerTransport(SSE_MESSAGE_PATH)

    async def handle_sse(request: Request) -> Response:
        console.info(f"SSE connection opened from {request.client.host if request.client else 'unknown'}")
        async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
        console.info("SSE connection closed.")
        # The SSE response was already sent by the transport.
        return Response()

    session_manager = StreamableHTTPSessionManager(app=server)

    routes: List[BaseRoute] = [
        Route(SSE_PATH, endpoint=handle_sse, methods=["GET"]),
        Route(SSE_MESSAGE_PATH, endpoint=ASGIEndpoint(sse.handle_post_message), methods=["POST"]),
        Route(STREAMABLE_HTTP_PATH, endpoint=ASGIEndpoint(session_manager.handle_request), methods=["GET", "POST", "DELETE"]),
    ]
    return routes, session_manager
