"""Argument schemas.

Components validate raw client arguments through the ``ArgsSchema`` protocol,
so the registry core does not depend on the validation library that built the
schema. The protocol has two duties:

- ``validate(raw)`` returns the typed value or raises ``SchemaValidationError``
  listing the offending fields.
- ``to_json_schema()`` returns a JSON-Schema document for the wire descriptor.

``PydanticSchema`` is the bundled implementation backed by a pydantic model.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Protocol, Type, TypeVar, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

T_co = TypeVar("T_co", covariant=True)
ModelT = TypeVar("ModelT", bound=BaseModel)


class FieldError(BaseModel):
    """A single schema violation."""

    field: str = Field(..., description="Dotted path of the offending field, empty for the root")
    message: str = Field(..., description="Why the value was rejected")

    model_config = ConfigDict(frozen=True)


class SchemaValidationError(Exception):
    """Raised by ``ArgsSchema.validate`` when the raw value does not match."""

    def __init__(self, errors: List[FieldError]) -> None:
        self.errors = errors
        super().__init__(self.summary())

    @property
    def fields(self) -> List[str]:
        return [e.field for e in self.errors]

    def summary(self) -> str:
        parts = [f"{e.field}: {e.message}" if e.field else e.message for e in self.errors]
        return "; ".join(parts) or "invalid arguments"


@runtime_checkable
class ArgsSchema(Protocol[T_co]):
    """Protocol for validation schemas used by components."""

    def validate(self, raw: Any) -> T_co: ...

    def to_json_schema(self) -> Dict[str, Any]: ...


class PydanticSchema(Generic[ModelT]):
    """``ArgsSchema`` backed by a pydantic model class.

    Args:
        model: The pydantic model describing the arguments.
    """

    def __init__(self, model: Type[ModelT]) -> None:
        self.model = model

    def validate(self, raw: Any) -> ModelT:
        try:
            return self.model.model_validate(raw)
        except ValidationError as e:
            raise SchemaValidationError(
                [
                    FieldError(field=".".join(str(part) for part in err["loc"]), message=err["msg"])
                    for err in e.errors()
                ]
            ) from e

    def to_json_schema(self) -> Dict[str, Any]:
        return self.model.model_json_schema()

    def __repr__(self) -> str:
        return f"PydanticSchema({self.model.__name__})"
