"""
Global Exception Handler for FastAPI Application.

This module provides a global exception handler that catches all unhandled
exceptions and logs detailed information including error ID and request
context. Component errors escaping a route are reported with their kind.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from capmesh.core.logging_config import get_logger
from capmesh.registry import ComponentError, ComponentErrorType

logger = get_logger(__name__)

_STATUS_CODES = {
    ComponentErrorType.NOT_FOUND: 404,
    ComponentErrorType.ALREADY_EXISTS: 409,
    ComponentErrorType.INVALID_ARGS: 422,
    ComponentErrorType.EXECUTION_ERROR: 500,
}


async def component_exception_handler(request: Request, exc: ComponentError) -> JSONResponse:
    """
    Report a ``ComponentError`` with a status code matching its kind.

    Args:
        request: The HTTP request that caused the exception
        exc: The component error that was raised

    Returns:
        JSONResponse with the error kind, message and component name
    """
    logger.warning(f"Component error in {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=_STATUS_CODES[exc.error_type],
        content={
            "detail": exc.message,
            "error_type": exc.error_type.value,
            "component": exc.component_name,
        },
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns a JSON response with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(ComponentError, component_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
