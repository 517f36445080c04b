"""MCP binding for the registry's dispatcher boundary.

``McpServerDispatcher`` installs registry handlers as request handlers of a
low-level ``mcp.server.lowlevel.Server``, translating the registry's wire
models to ``mcp.types`` results.

Error mapping:
- Action failures arrive as ``InvokeActionResult`` with ``is_error`` and become
  a ``CallToolResult`` with ``isError=True``.
- A ``ComponentError`` raised by a handler (unknown prompt, template failure)
  becomes an ``McpError`` so the client receives a JSON-RPC error response.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Optional

from mcp import types
from mcp.server.lowlevel import Server
from mcp.shared.exceptions import McpError

from capmesh.core.logging_config import get_logger
from capmesh.registry.dispatch import Operation, RequestHandler
from capmesh.registry.errors import ComponentError, ComponentErrorType
from capmesh.registry.models import (
    GenerateTemplateResult,
    InvokeActionResult,
    ListActionsResult,
    ListTemplatesResult,
)

logger = get_logger(__name__)

_ERROR_CODES: Dict[ComponentErrorType, int] = {
    ComponentErrorType.NOT_FOUND: types.INVALID_PARAMS,
    ComponentErrorType.INVALID_ARGS: types.INVALID_PARAMS,
    ComponentErrorType.ALREADY_EXISTS: types.INTERNAL_ERROR,
    ComponentErrorType.EXECUTION_ERROR: types.INTERNAL_ERROR,
}


def to_mcp_error(error: ComponentError) -> McpError:
    """Convert a component error into an MCP protocol error."""
    return McpError(
        types.ErrorData(
            code=_ERROR_CODES[error.error_type],
            message=str(error),
            data={"type": error.error_type.value, "component": error.component_name},
        )
    )


def _to_tool(descriptor: Any) -> types.Tool:
    return types.Tool.model_validate(descriptor.model_dump(by_alias=True))


def _to_prompt(descriptor: Any) -> types.Prompt:
    # MCP prompt arguments are flat string parameters, one per top-level property
    schema = descriptor.args_schema
    required = set(schema.get("required", []))
    return types.Prompt(
        name=descriptor.name,
        description=descriptor.description,
        arguments=[
            types.PromptArgument(name=prop, description=spec.get("description"), required=prop in required)
            for prop, spec in schema.get("properties", {}).items()
        ],
    )


def _to_call_tool_result(result: InvokeActionResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in result.content],
        structuredContent=result.structured,
        isError=result.is_error,
    )


def _to_get_prompt_result(result: GenerateTemplateResult) -> types.GetPromptResult:
    return types.GetPromptResult(
        description=result.description,
        messages=[
            types.PromptMessage(
                role=message.role,
                content=types.TextContent(type="text", text=message.content.text),
            )
            for message in result.messages
        ],
    )


class McpServerDispatcher:
    """Dispatcher that routes registry operations through an MCP low-level server.

    Args:
        server: The ``mcp`` low-level server whose ``request_handlers`` receive the handlers.
    """

    def __init__(self, server: Server) -> None:
        self.server = server

    def set_request_handler(self, operation: Operation, handler: RequestHandler) -> None:
        binders: Dict[Operation, Callable[[Any], None]] = {
            Operation.LIST_ACTIONS: self._bind_list_tools,
            Operation.CALL_ACTION: self._bind_call_tool,
            Operation.LIST_TEMPLATES: self._bind_list_prompts,
            Operation.GET_TEMPLATE: self._bind_get_prompt,
        }
        binders[operation](handler)
        logger.debug(f"Bound MCP handler for {operation.value}")

    def _bind_list_tools(self, handler: Callable[[], Awaitable[ListActionsResult]]) -> None:
        async def _list_tools(req: types.ListToolsRequest) -> types.ServerResult:
            result = await handler()
            return types.ServerResult(types.ListToolsResult(tools=[_to_tool(d) for d in result.actions]))

        self.server.request_handlers[types.ListToolsRequest] = _list_tools

    def _bind_call_tool(
        self, handler: Callable[[str, Optional[Dict[str, Any]]], Awaitable[InvokeActionResult]]
    ) -> None:
        async def _call_tool(req: types.CallToolRequest) -> types.ServerResult:
            logger.info(f"Handling tool call: {req.params.name}")
            try:
                result = await handler(req.params.name, req.params.arguments)
            except ComponentError as e:
                raise to_mcp_error(e) from e
            return types.ServerResult(_to_call_tool_result(result))

        self.server.request_handlers[types.CallToolRequest] = _call_tool

    def _bind_list_prompts(self, handler: Callable[[], Awaitable[ListTemplatesResult]]) -> None:
        async def _list_prompts(req: types.ListPromptsRequest) -> types.ServerResult:
            result = await handler()
            return types.ServerResult(types.ListPromptsResult(prompts=[_to_prompt(d) for d in result.templates]))

        self.server.request_handlers[types.ListPromptsRequest] = _list_prompts

    def _bind_get_prompt(
        self, handler: Callable[[str, Optional[Dict[str, Any]]], Awaitable[GenerateTemplateResult]]
    ) -> None:
        async def _get_prompt(req: types.GetPromptRequest) -> types.ServerResult:
            try:
                result = await handler(req.params.name, req.params.arguments)
            except ComponentError as e:
                raise to_mcp_error(e) from e
            return types.ServerResult(_to_get_prompt_result(result))

        self.server.request_handlers[types.GetPromptRequest] = _get_prompt
