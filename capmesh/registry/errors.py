"""Error types for the capability registry.

Purpose:
- Provide one tagged exception, ``ComponentError``, shared by actions and
  templates so the dispatcher can map failures to responses uniformly.
- Provide ``RegistryError`` for registry lifecycle failures (rebinding a
  dispatcher, mutating a registry that failed to initialize).

Usage:
- Catch ``ComponentError`` and inspect ``error_type`` to tell a missing
  capability from a validation or execution failure.
- The underlying exception, when there is one, is kept on ``cause`` and as
  ``__cause__``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ComponentErrorType(str, Enum):
    """Failure kinds shared by every capability kind."""

    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    INVALID_ARGS = "INVALID_ARGS"
    EXECUTION_ERROR = "EXECUTION_ERROR"


class ComponentError(Exception):
    """Error raised by repositories and components.

    Args:
        error_type: The failure kind.
        message: Human-readable error description.
        component_name: Name of the offending component (prefixed when known).
        cause: Optional underlying exception.
        details: Optional structured payload (e.g. field-level validation errors).
    """

    def __init__(
        self,
        error_type: ComponentErrorType,
        message: str,
        component_name: str,
        *,
        cause: Optional[BaseException] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(f"{error_type.value}: {message}")
        self.error_type = error_type
        self.message = message
        self.component_name = component_name
        self.cause = cause
        self.details = details


class RegistryError(Exception):
    """Raised for registry lifecycle violations."""
