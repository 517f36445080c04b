"""
MCP server construction.

``create_server`` is the process bootstrap: it builds the registry, registers
the bundled capabilities and binds the registry to an MCP low-level server.
The transports (stdio here, SSE in ``capmesh.server.main``) only move bytes
between a client and that server.
"""

from typing import Optional, Tuple

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from capmesh.capabilities import load_capabilities
from capmesh.core.logging_config import get_logger
from capmesh.registry import Registry

from .core.config import Settings, settings as default_settings
from .mcp_dispatcher import McpServerDispatcher

logger = get_logger(__name__)


def create_server(settings: Optional[Settings] = None) -> Tuple[Server, Registry]:
    """
    Create an MCP server with every bundled capability registered.

    Args:
        settings: Application settings (defaults to the environment-loaded settings)

    Returns:
        The low-level MCP server and the registry bound to it.

    Raises:
        Exception: Any registration or binding failure; the process should not continue.
    """
    settings = settings or default_settings
    logger.info(f"Creating MCP server {settings.server_name} {settings.server_version}")

    registry = Registry(settings.naming)
    load_capabilities(registry)

    server: Server = Server(settings.server_name, version=settings.server_version)
    registry.bind_dispatcher(McpServerDispatcher(server))
    logger.info("Repositories registered successfully")
    return server, registry


async def run_stdio(server: Server) -> None:
    """Serve ``server`` over standard input/output until the client disconnects."""
    logger.info("Starting MCP server on stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
    logger.info("Stdio transport closed")
