"""Actions: invocable capabilities (MCP tools).

An action validates its arguments against ``input_schema``, awaits its
behavior with the typed arguments and checks the result against
``output_schema``.

``ActionRepository`` answers the list/call operation pair. Every failed call,
an unknown name included, is reported as data: the envelope carries an error
text and ``is_error`` instead of faulting the request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional

from pydantic import BaseModel
from pydantic_core import to_json, to_jsonable_python

from capmesh.core.logging_config import get_logger

from .base import BaseComponent, BaseDefinition, BaseRepository
from .dispatch import Dispatcher, Operation
from .errors import ComponentError, ComponentErrorType
from .models import ActionDescriptor, InvokeActionResult, ListActionsResult, TextPayload
from .naming import NamingConfig
from .schema import ArgsSchema, SchemaValidationError

logger = get_logger(__name__)

ActionBehavior = Callable[[Any], Awaitable[Any]]


@dataclass(frozen=True)
class ActionDefinition(BaseDefinition):
    """Declared identity and schemas of an action."""

    input_schema: ArgsSchema[Any]
    output_schema: ArgsSchema[Any]


@dataclass(frozen=True)
class ActionBinding:
    """An action definition paired with its behavior, ready for registration."""

    definition: ActionDefinition
    behavior: ActionBehavior


class Action(BaseComponent[ActionDefinition, ActionDescriptor]):
    """Action component wrapping a definition and an async behavior."""

    def __init__(
        self,
        definition: ActionDefinition,
        behavior: ActionBehavior,
        *,
        naming: Optional[NamingConfig] = None,
    ) -> None:
        super().__init__(definition, naming=naming)
        self._behavior = behavior
        self._json_input_schema = definition.input_schema.to_json_schema()
        self._json_output_schema = definition.output_schema.to_json_schema()

    @classmethod
    def from_binding(cls, binding: ActionBinding, *, naming: Optional[NamingConfig] = None) -> "Action":
        return cls(binding.definition, binding.behavior, naming=naming)

    @property
    def json_input_schema(self) -> Dict[str, Any]:
        return self._json_input_schema

    @property
    def json_output_schema(self) -> Dict[str, Any]:
        return self._json_output_schema

    def get_definition(self) -> ActionDescriptor:
        return ActionDescriptor(
            name=self.name,
            description=self.description,
            input_schema=self._json_input_schema,
            output_schema=self._json_output_schema,
        )

    async def invoke(self, raw_args: Any) -> Any:
        """
        Validate ``raw_args`` and run the behavior.

        Args:
            raw_args: Arguments as received from the client (``None`` means no arguments).

        Returns:
            The behavior's result, validated against the output schema.

        Raises:
            ComponentError: ``INVALID_ARGS`` if validation fails (the behavior is not
                called), ``EXECUTION_ERROR`` if the behavior raises or returns a result
                that does not match the output schema.
        """
        args = self._validate_args(self.definition.input_schema, raw_args)
        try:
            result = await self._behavior(args)
        except Exception as e:
            raise self._execution_error("Execution failed", e) from e
        try:
            return self.definition.output_schema.validate(result)
        except SchemaValidationError as e:
            raise self._execution_error("Invalid result", e) from e


def _result_envelope(result: Any) -> InvokeActionResult:
    if isinstance(result, str):
        return InvokeActionResult(content=[TextPayload(text=result)])
    if isinstance(result, BaseModel):
        data = result.model_dump(mode="json")
    else:
        data = to_jsonable_python(result)
    return InvokeActionResult(
        content=[TextPayload(text=to_json(data).decode())],
        structured=data if isinstance(data, dict) else None,
    )


class ActionRepository(BaseRepository[Action]):
    """Catalog of actions bound to the list/call operation pair."""

    kind = "tool"

    def list_actions(self) -> ListActionsResult:
        return ListActionsResult(actions=[action.get_definition() for action in self.get_all()])

    async def call_action(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> InvokeActionResult:
        """
        Invoke an action by its prefixed name.

        Never raises: an unknown name, invalid arguments, a failing behavior and
        an unserializable result are all returned as an error envelope.
        """
        try:
            action = self.get(name)
            if action is None:
                raise ComponentError(ComponentErrorType.NOT_FOUND, f"Unknown tool: {name}", name)
            try:
                envelope = _result_envelope(await action.invoke(arguments))
            except ComponentError:
                raise
            except Exception as e:
                raise ComponentError(
                    ComponentErrorType.EXECUTION_ERROR, f"Execution failed: {e}", name, cause=e
                ) from e
        except ComponentError as e:
            logger.error(f"Tool execution error ({name}): {e}", exc_info=e.cause is not None)
            return InvokeActionResult(
                content=[TextPayload(text=f"Error executing tool {name}: {e}")],
                is_error=True,
            )
        logger.debug(f"Tool {name} executed successfully")
        return envelope

    def bind(self, dispatcher: Dispatcher) -> None:
        """Install the list/call handlers on ``dispatcher``."""
        logger.info("Registering tool handlers with dispatcher")

        async def _list() -> ListActionsResult:
            return self.list_actions()

        dispatcher.set_request_handler(Operation.LIST_ACTIONS, _list)
        dispatcher.set_request_handler(Operation.CALL_ACTION, self.call_action)
