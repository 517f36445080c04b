"""Shared component and repository abstractions.

A *component* pairs an immutable definition with an async behavior and exposes
it under a prefixed wire name. A *repository* is the name-keyed catalog of
components of one kind.

Both capability kinds (actions and templates) build on these classes, which is
what keeps lookup, uniqueness and error reporting identical across kinds.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

from capmesh.core.logging_config import get_logger

from .errors import ComponentError, ComponentErrorType
from .naming import NamingConfig
from .schema import ArgsSchema, SchemaValidationError

logger = get_logger(__name__)


@dataclass(frozen=True)
class BaseDefinition:
    """Declared identity of a capability.

    Attributes
    ----------
    name:
        Unprefixed name, unique within its kind.
    description:
        Human-readable summary shown to clients.
    """

    name: str
    description: str


DefinitionT = TypeVar("DefinitionT", bound=BaseDefinition)
DescriptorT = TypeVar("DescriptorT", bound=BaseModel)


class BaseComponent(ABC, Generic[DefinitionT, DescriptorT]):
    """Base class for all capability components.

    The prefixed name is derived once at construction and never changes; it is
    the only identity used for lookup.
    """

    def __init__(self, definition: DefinitionT, *, naming: Optional[NamingConfig] = None) -> None:
        self._definition = definition
        self._name = (naming or NamingConfig()).apply(definition.name)

    @property
    def name(self) -> str:
        """Prefixed wire name."""
        return self._name

    @property
    def description(self) -> str:
        return self._definition.description

    @property
    def definition(self) -> DefinitionT:
        """The declared (unprefixed) definition."""
        return self._definition

    @abstractmethod
    def get_definition(self) -> DescriptorT:
        """Client-facing descriptor: the definition under the prefixed name with JSON schemas."""

    def _validate_args(self, schema: ArgsSchema[Any], raw_args: Any) -> Any:
        """Validate raw client arguments, raising ``INVALID_ARGS`` on mismatch."""
        try:
            return schema.validate({} if raw_args is None else raw_args)
        except SchemaValidationError as e:
            raise ComponentError(
                ComponentErrorType.INVALID_ARGS,
                f"Invalid arguments for {self._name}: {e.summary()}",
                self._name,
                cause=e,
                details=[err.model_dump() for err in e.errors],
            ) from e

    def _execution_error(self, message: str, cause: Exception) -> ComponentError:
        return ComponentError(
            ComponentErrorType.EXECUTION_ERROR,
            f"{message}: {cause}",
            self._name,
            cause=cause,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


ComponentT = TypeVar("ComponentT", bound=BaseComponent)


class BaseRepository(Generic[ComponentT]):
    """
    Name-keyed catalog of components of one kind.

    Notes:
        - ``register`` refuses duplicates and leaves the catalog untouched.
        - ``get`` returns ``None`` for unknown names and never raises.
        - Listing follows insertion order.
        - Mutation is not synchronized; register and unregister are expected
          before the owning registry starts serving requests.
    """

    kind: str = "component"

    def __init__(self) -> None:
        self._components: Dict[str, ComponentT] = {}

    def register(self, component: ComponentT) -> None:
        """
        Register a component under its prefixed name.

        Raises:
            ComponentError: ``ALREADY_EXISTS`` if the name is taken.
        """
        name = component.name
        if name in self._components:
            raise ComponentError(
                ComponentErrorType.ALREADY_EXISTS,
                f"{self.kind.capitalize()} {name} already registered",
                name,
            )
        self._components[name] = component
        logger.debug(f"Registered {self.kind}: {name}")

    def unregister(self, name: str) -> None:
        """
        Remove a component by its prefixed name.

        Raises:
            ComponentError: ``NOT_FOUND`` if no component has that name.
        """
        if name not in self._components:
            raise ComponentError(
                ComponentErrorType.NOT_FOUND,
                f"Cannot unregister: {self.kind} {name} not found",
                name,
            )
        del self._components[name]
        logger.debug(f"Unregistered {self.kind}: {name}")

    def get(self, name: str) -> Optional[ComponentT]:
        return self._components.get(name)

    def get_all(self) -> List[ComponentT]:
        return list(self._components.values())

    def get_all_definitions(self) -> List[BaseModel]:
        return [component.get_definition() for component in self.get_all()]

    def names(self) -> List[str]:
        return list(self._components)

    def __contains__(self, name: object) -> bool:
        return name in self._components

    def __len__(self) -> int:
        return len(self._components)
