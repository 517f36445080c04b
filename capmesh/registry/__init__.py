"""Capability registry and dispatch core.

A *capability* is either an **action** (an invocable tool) or a **template**
(a message-template generator, an MCP prompt).

- Capability modules declare ``ActionBinding``/``TemplateBinding`` values: an
  immutable definition plus an async behavior.
- The bootstrap registers them on a ``Registry``, which builds the components
  under their prefixed names and stores them in one repository per kind.
- ``Registry.bind_dispatcher`` wires both repositories onto a dispatcher; from
  then on requests flow dispatcher -> repository -> component -> behavior.

This package exports:

- ``Registry``/``RegistryStatus``: the lifecycle owner.
- ``Action``/``ActionDefinition``/``ActionBinding``/``ActionRepository``.
- ``Template``/``TemplateDefinition``/``TemplateBinding``/``TemplateRepository``.
- ``ComponentError``/``ComponentErrorType``/``RegistryError``: the error model.
- ``PydanticSchema``/``ArgsSchema``: argument validation.
- ``Dispatcher``/``InMemoryDispatcher``/``Operation``: the dispatcher boundary.
"""

from .action import Action, ActionBinding, ActionDefinition, ActionRepository
from .base import BaseComponent, BaseDefinition, BaseRepository
from .dispatch import Dispatcher, DispatchError, InMemoryDispatcher, Operation
from .errors import ComponentError, ComponentErrorType, RegistryError
from .models import TemplateMessage, TextPayload
from .naming import NamingConfig
from .registry import RegistrationSummary, Registry, RegistryStatus
from .schema import ArgsSchema, PydanticSchema, SchemaValidationError
from .template import Template, TemplateBinding, TemplateDefinition, TemplateRepository

__all__ = [
    "Action",
    "ActionBinding",
    "ActionDefinition",
    "ActionRepository",
    "ArgsSchema",
    "BaseComponent",
    "BaseDefinition",
    "BaseRepository",
    "ComponentError",
    "ComponentErrorType",
    "DispatchError",
    "Dispatcher",
    "InMemoryDispatcher",
    "NamingConfig",
    "Operation",
    "PydanticSchema",
    "RegistrationSummary",
    "Registry",
    "RegistryError",
    "RegistryStatus",
    "SchemaValidationError",
    "Template",
    "TemplateBinding",
    "TemplateDefinition",
    "TemplateMessage",
    "TemplateRepository",
    "TextPayload",
]
