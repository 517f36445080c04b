"""Templates: message-template generators (MCP prompts).

A template validates its arguments against ``args_schema`` and awaits its
generator, which returns the messages to hand to the client.

``TemplateRepository`` answers the list/get operation pair. Unlike actions, a
failed generation is re-raised to the dispatcher as a protocol fault: a
template without messages has no meaningful partial response.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from capmesh.core.logging_config import get_logger

from .base import BaseComponent, BaseDefinition, BaseRepository
from .dispatch import Dispatcher, Operation
from .errors import ComponentError, ComponentErrorType
from .models import (
    GenerateTemplateResult,
    ListTemplatesResult,
    TemplateArgument,
    TemplateDescriptor,
    TemplateMessage,
)
from .naming import NamingConfig
from .schema import ArgsSchema

logger = get_logger(__name__)

TemplateGenerator = Callable[[Any], Awaitable[Sequence[Union[TemplateMessage, Dict[str, Any]]]]]

_messages_adapter: TypeAdapter[List[TemplateMessage]] = TypeAdapter(List[TemplateMessage])


@dataclass(frozen=True)
class TemplateDefinition(BaseDefinition):
    """Declared identity and argument schema of a template."""

    args_schema: ArgsSchema[Any]


@dataclass(frozen=True)
class TemplateBinding:
    """A template definition paired with its generator, ready for registration."""

    definition: TemplateDefinition
    generator: TemplateGenerator


class Template(BaseComponent[TemplateDefinition, TemplateDescriptor]):
    """Template component wrapping a definition and an async message generator."""

    def __init__(
        self,
        definition: TemplateDefinition,
        generator: TemplateGenerator,
        *,
        naming: Optional[NamingConfig] = None,
    ) -> None:
        super().__init__(definition, naming=naming)
        self._generator = generator
        self._json_args_schema = definition.args_schema.to_json_schema()

    @classmethod
    def from_binding(cls, binding: TemplateBinding, *, naming: Optional[NamingConfig] = None) -> "Template":
        return cls(binding.definition, binding.generator, naming=naming)

    @property
    def json_args_schema(self) -> Dict[str, Any]:
        return self._json_args_schema

    def get_definition(self) -> TemplateDescriptor:
        return TemplateDescriptor(
            name=self.name,
            description=self.description,
            args_schema=self._json_args_schema,
        )

    async def generate(self, raw_args: Any) -> List[TemplateMessage]:
        """
        Validate ``raw_args`` and generate the template's messages.

        Raises:
            ComponentError: ``INVALID_ARGS`` if validation fails (the generator is not
                called), ``EXECUTION_ERROR`` if the generator raises or returns
                something other than a list of messages.
        """
        args = self._validate_args(self.definition.args_schema, raw_args)
        try:
            messages = await self._generator(args)
        except Exception as e:
            raise self._execution_error("Message generation failed", e) from e
        try:
            return _messages_adapter.validate_python(list(messages))
        except (TypeError, ValidationError) as e:
            raise self._execution_error("Invalid messages", e) from e


class TemplateRepository(BaseRepository[Template]):
    """Catalog of templates bound to the list/get operation pair."""

    kind = "prompt"

    def list_templates(self) -> ListTemplatesResult:
        templates = []
        for template in self.get_all():
            descriptor = template.get_definition()
            descriptor.arguments = [TemplateArgument(json_schema=template.json_args_schema)]
            templates.append(descriptor)
        return ListTemplatesResult(templates=templates)

    async def get_template(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> GenerateTemplateResult:
        """
        Generate the messages of a template by its prefixed name.

        Raises:
            ComponentError: ``NOT_FOUND`` for unknown names; any generation failure
                is re-raised unchanged.
        """
        logger.info(f"Handling prompt request: {name}")
        template = self.get(name)
        if template is None:
            raise ComponentError(ComponentErrorType.NOT_FOUND, f"Unknown prompt: {name}", name)

        try:
            messages = await template.generate(arguments)
        except ComponentError as e:
            logger.error(f"Prompt generation error ({name}): {e}", exc_info=e.cause is not None)
            raise
        logger.debug(f"Prompt {name} generated {len(messages)} message(s)")
        return GenerateTemplateResult(description=template.description, messages=messages)

    def bind(self, dispatcher: Dispatcher) -> None:
        """Install the list/get handlers on ``dispatcher``."""
        logger.info("Registering prompt handlers with dispatcher")

        async def _list() -> ListTemplatesResult:
            return self.list_templates()

        dispatcher.set_request_handler(Operation.LIST_TEMPLATES, _list)
        dispatcher.set_request_handler(Operation.GET_TEMPLATE, self.get_template)
