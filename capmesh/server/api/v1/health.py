"""
Health Check Endpoints.

This module provides basic system status endpoints (health, version, registry
status) used for monitoring and deployment verification.
"""

from fastapi import APIRouter

from capmesh.server.core.config import settings
from capmesh.server.services.deps import RegistryDep

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
)
async def health_check():
    """
    Health check endpoint.

    Returns a simple status indicator to confirm the server is running and reachable.
    """
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the MCP server.",
    response_description="Version object.",
)
async def version():
    """
    Get server version.

    Returns the name and version announced to MCP clients.
    """
    return {"name": settings.server_name, "version": settings.server_version}


@router.get(
    "/status",
    summary="Registry Status",
    description="Retrieve the registry lifecycle status and the registered tools and prompts.",
    response_description="Registry status object.",
)
async def registry_status(registry: RegistryDep):
    """
    Get registry status.

    Returns the lifecycle status, the initialization error if any, and the
    registration summary.
    """
    return registry.describe()
