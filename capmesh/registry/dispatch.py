"""Dispatcher boundary.

A dispatcher is the request-routing collaborator the registry binds its
handlers to. The registry only needs "register handler for operation X":

- list operations take no arguments,
- call/get operations take ``(name, arguments)``.

``InMemoryDispatcher`` routes operations to handlers inside the process. It is
used to embed the registry without a transport and in tests; the MCP binding
lives in ``capmesh.server.mcp_dispatcher``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, Protocol, Union, runtime_checkable

from .models import GenerateTemplateResult, InvokeActionResult, ListActionsResult, ListTemplatesResult


class Operation(str, Enum):
    """Protocol operations, valued by their MCP method names."""

    LIST_ACTIONS = "tools/list"
    CALL_ACTION = "tools/call"
    LIST_TEMPLATES = "prompts/list"
    GET_TEMPLATE = "prompts/get"


ListHandler = Callable[[], Awaitable[Any]]
CallHandler = Callable[[str, Optional[Dict[str, Any]]], Awaitable[Any]]
RequestHandler = Union[ListHandler, CallHandler]


@runtime_checkable
class Dispatcher(Protocol):
    """Protocol for request dispatchers the registry can bind to."""

    def set_request_handler(self, operation: Operation, handler: RequestHandler) -> None: ...


class DispatchError(LookupError):
    """Raised when no handler is bound for an operation."""

    def __init__(self, operation: Operation) -> None:
        super().__init__(f"No handler bound for operation '{operation.value}'")
        self.operation = operation


class InMemoryDispatcher:
    """In-process dispatcher keeping one handler per operation.

    Binding a handler again for the same operation replaces the previous one.
    """

    def __init__(self) -> None:
        self.handlers: Dict[Operation, RequestHandler] = {}

    def set_request_handler(self, operation: Operation, handler: RequestHandler) -> None:
        self.handlers[operation] = handler

    def _handler(self, operation: Operation) -> Any:
        try:
            return self.handlers[operation]
        except KeyError:
            raise DispatchError(operation) from None

    async def list_actions(self) -> ListActionsResult:
        return await self._handler(Operation.LIST_ACTIONS)()

    async def call_action(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> InvokeActionResult:
        return await self._handler(Operation.CALL_ACTION)(name, arguments)

    async def list_templates(self) -> ListTemplatesResult:
        return await self._handler(Operation.LIST_TEMPLATES)()

    async def get_template(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> GenerateTemplateResult:
        return await self._handler(Operation.GET_TEMPLATE)(name, arguments)
