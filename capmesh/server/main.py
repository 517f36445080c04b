"""
HTTP Application Entry Point.

This module builds the FastAPI application that serves the MCP server over
SSE (``GET /sse`` opens the event stream, ``POST /messages/`` carries client
messages) next to the health and registry status endpoints.
"""

from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from mcp.server.sse import SseServerTransport
from starlette.responses import Response

from capmesh.core.logging_config import get_logger, setup_logging

from .api.v1 import health
from .app import create_server
from .core.config import Settings, settings as default_settings
from .exception_handlers import setup_exception_handlers

logger = get_logger(__name__)

SSE_PATH = "/sse"
MESSAGES_PATH = "/messages/"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create the FastAPI application with a freshly bootstrapped MCP server.

    Args:
        settings: Application settings (defaults to the environment-loaded settings)

    Returns:
        The configured FastAPI application. The MCP server and its registry are
        available as ``app.state.mcp_server`` and ``app.state.registry``.
    """
    settings = settings or default_settings
    server, registry = create_server(settings)
    sse = SseServerTransport(MESSAGES_PATH)

    app = FastAPI(
        title=settings.server_name,
        description="""
        capmesh MCP Server

        Exposes the registered tools and prompts to MCP clients over SSE.
        """,
        version=settings.server_version,
    )
    app.state.mcp_server = server
    app.state.registry = registry

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)

    async def handle_sse(request: Request) -> Response:
        logger.info("Received SSE connection request")
        async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
        logger.info("Client closed connection")
        return Response()

    app.add_route(SSE_PATH, handle_sse, methods=["GET"])
    app.mount(MESSAGES_PATH, app=sse.handle_post_message)
    app.include_router(health.router, tags=["health"])

    logger.info(f"Connect to the MCP Server at http://{settings.server_host}:{settings.server_port}{SSE_PATH}")
    return app


def run_http(settings: Optional[Settings] = None) -> None:
    """Serve the SSE application with uvicorn."""
    settings = settings or default_settings
    setup_logging()
    uvicorn.run(create_app(settings), host=settings.server_host, port=settings.server_port)
