# The module provides the FastAPI application that serves the MCP transports.
# Author: Shibo Li
# Date: 2025-06-11
# Version: 0.2.0

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from bridge.api.transports import build_transport_routes
from bridge.core.config import Settings, get_settings
from bridge.core.mcp_server import build_mcp_server
from bridge.core.tool_registry import ToolRegistry
from bridge.utils.logger import console


def create_app(settings: Optional[Settings] = None, registry: Optional[ToolRegistry] = None) -> FastAPI:
    """
    Builds a new application. Each application owns its own streamable HTTP
    session manager, which can only be run once.
    """
    settings = settings or get_settings()
    console.set_level(settings.LOG_LEVEL)
    registry = registry or ToolRegistry()
    server = build_mcp_server(registry, settings)
    routes, session_manager = build_transport_routes(server)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        console.rule(f"{settings.SERVER_NAME} {settings.SERVER_VERSION}")
        async with session_manager.run():
            console.success(f"{settings.SERVER_NAME} {settings.SERVER_VERSION} is ready: SSE on /sse, streamable HTTP on /mcp.")
            yield
        console.info("Streamable HTTP session manager stopped.")

    app = FastAPI(
        title=settings.SERVER_NAME,
        version=settings.SERVER_VERSION,
        description="An authless MCP server exposing calculator and FastAPI/LangChain proxy tools.",
        routes=routes,
        lifespan=lifespan,
    )

    @app.get("/", summary="Health Check", tags=["Status"])
    def read_root():
        """Root endpoint to check if the service is alive."""
        console.info("Health check endpoint was hit.")
        return {"message": "MCP Server is alive and running!"}

    app.state.registry = registry
    app.state.mcp_server = server
    return app


app = create_app()
