"""Capability registry.

The registry owns one repository per capability kind and binds them to a
dispatcher. It is created explicitly by the process bootstrap and passed to
whatever needs it; there is no global instance.

Lifecycle::

    collecting --bind_dispatcher--> initializing --> ready
                                         |
                                         +--> error   (terminal)

A registry binds at most one dispatcher, ever. A registry that failed to
initialize refuses further binding and registration; recovery is a clean
restart with a new registry.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from capmesh.core.logging_config import get_logger

from .action import Action, ActionBehavior, ActionDefinition, ActionRepository
from .dispatch import Dispatcher
from .errors import RegistryError
from .naming import NamingConfig
from .template import Template, TemplateDefinition, TemplateGenerator, TemplateRepository

logger = get_logger(__name__)


class RegistryStatus(str, Enum):
    """Registry lifecycle states."""

    COLLECTING = "collecting"
    INITIALIZING = "initializing"
    READY = "ready"
    ERROR = "error"


class RegisteredComponent(BaseModel):
    type: str = Field(..., description="Component kind (Tool or Prompt)")
    name: str
    description: str


class RegistrationSummary(BaseModel):
    """Counts and names of all registered capabilities."""

    tool_count: int = 0
    prompt_count: int = 0
    components: List[RegisteredComponent] = Field(default_factory=list)

    @property
    def tool_names(self) -> List[str]:
        return [c.name for c in self.components if c.type == "Tool"]

    @property
    def prompt_names(self) -> List[str]:
        return [c.name for c in self.components if c.type == "Prompt"]


class Registry:
    """
    Owner of the action and template repositories and the dispatcher binding.

    Registration is synchronous and not locked. It is meant to happen before
    ``bind_dispatcher``; registering while requests are in flight is not a
    supported configuration.

    Args:
        naming: Naming configuration applied to every component built by this registry.
    """

    def __init__(self, naming: Optional[NamingConfig] = None) -> None:
        self._naming = naming or NamingConfig()
        self._actions = ActionRepository()
        self._templates = TemplateRepository()
        self._status = RegistryStatus.COLLECTING
        self._error: Optional[BaseException] = None
        self._dispatcher: Optional[Dispatcher] = None

    @property
    def naming(self) -> NamingConfig:
        return self._naming

    @property
    def actions(self) -> ActionRepository:
        return self._actions

    @property
    def templates(self) -> TemplateRepository:
        return self._templates

    @property
    def status(self) -> RegistryStatus:
        return self._status

    @property
    def error(self) -> Optional[BaseException]:
        """The initialization failure, if the registry is in ``error``."""
        return self._error

    @property
    def dispatcher(self) -> Optional[Dispatcher]:
        return self._dispatcher

    def bind_dispatcher(self, dispatcher: Dispatcher) -> None:
        """
        Wire both repositories onto ``dispatcher``.

        Raises:
            RegistryError: If a dispatcher was already bound or the registry is in ``error``.
            Exception: Whatever failed while wiring; the registry is left in ``error``.
        """
        if self._dispatcher is not None:
            raise RegistryError("Registry already initialized with a dispatcher")
        if self._status is RegistryStatus.ERROR:
            raise RegistryError("Registry is in error state; create a new registry to retry")

        try:
            logger.info("Initializing registry with dispatcher")
            self._status = RegistryStatus.INITIALIZING
            self._dispatcher = dispatcher

            self._actions.bind(dispatcher)
            self._templates.bind(dispatcher)

            self._status = RegistryStatus.READY
            logger.info("Registry initialized successfully")
        except Exception as e:
            self._status = RegistryStatus.ERROR
            self._error = e
            logger.error(f"Registry initialization failed: {e}", exc_info=True)
            raise

        self.log_registration_summary()

    def _ensure_usable(self, operation: str) -> None:
        if self._status is RegistryStatus.ERROR:
            raise RegistryError(f"Cannot {operation}: Registry is in error state")

    def _post_init_suffix(self) -> str:
        return " (post-initialization)" if self._status is RegistryStatus.READY else ""

    def register_action(self, definition: ActionDefinition, behavior: ActionBehavior) -> Action:
        """
        Build an action with this registry's naming and register it.

        Raises:
            RegistryError: If the registry is in ``error``.
            ComponentError: ``ALREADY_EXISTS`` if the prefixed name is taken.
        """
        self._ensure_usable("register tool")
        action = Action(definition, behavior, naming=self._naming)
        logger.info(f"Registering tool{self._post_init_suffix()}: {action.name}")
        self._actions.register(action)
        return action

    def register_template(self, definition: TemplateDefinition, generator: TemplateGenerator) -> Template:
        """
        Build a template with this registry's naming and register it.

        Raises:
            RegistryError: If the registry is in ``error``.
            ComponentError: ``ALREADY_EXISTS`` if the prefixed name is taken.
        """
        self._ensure_usable("register prompt")
        template = Template(definition, generator, naming=self._naming)
        logger.info(f"Registering prompt{self._post_init_suffix()}: {template.name}")
        self._templates.register(template)
        return template

    def unregister_action(self, name: str) -> None:
        self._ensure_usable("unregister tool")
        logger.info(f"Unregistering tool: {name}")
        self._actions.unregister(name)

    def unregister_template(self, name: str) -> None:
        self._ensure_usable("unregister prompt")
        logger.info(f"Unregistering prompt: {name}")
        self._templates.unregister(name)

    def summary(self) -> RegistrationSummary:
        components = [
            RegisteredComponent(type="Tool", name=a.name, description=a.description) for a in self._actions.get_all()
        ]
        components += [
            RegisteredComponent(type="Prompt", name=t.name, description=t.description)
            for t in self._templates.get_all()
        ]
        return RegistrationSummary(
            tool_count=len(self._actions),
            prompt_count=len(self._templates),
            components=components,
        )

    def log_registration_summary(self) -> RegistrationSummary:
        summary = self.summary()
        logger.info("=== Registry Initialization Complete ===")
        for component in summary.components:
            logger.info(f"  {component.type:<6} | {component.name} | {component.description}")
        logger.info(f"Server ready with {summary.tool_count} tools and {summary.prompt_count} prompts")
        return summary

    def describe(self) -> Dict[str, Any]:
        """Status snapshot used by the HTTP status endpoint."""
        return {
            "status": self._status.value,
            "error": str(self._error) if self._error is not None else None,
            "summary": self.summary().model_dump(),
        }
