"""
Process entry point.

Runs the MCP server on the transport selected by ``CAPMESH_TRANSPORT``:
``stdio`` (default) speaks the protocol over standard input/output, ``sse``
starts the HTTP application with uvicorn.
"""

import asyncio

from capmesh.core.logging_config import get_logger, setup_logging
from capmesh.server.app import create_server, run_stdio
from capmesh.server.core.config import settings
from capmesh.server.main import run_http

logger = get_logger(__name__)


def main() -> None:
    if settings.transport == "sse":
        run_http(settings)
        return

    setup_logging()
    server, _registry = create_server(settings)
    try:
        asyncio.run(run_stdio(server))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
