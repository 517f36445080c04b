"""
Registry Dependency.

Provides the process registry stored on the application state to API endpoints.
"""

from typing import Annotated

from fastapi import Depends, Request

from capmesh.registry import Registry


def get_registry(request: Request) -> Registry:
    """Return the registry created for this application."""
    return request.app.state.registry


RegistryDep = Annotated[Registry, Depends(get_registry)]
