"""Wire models returned by the repository request handlers.

These are the transport-agnostic response shapes. Field names serialize with
the protocol's camelCase aliases (``model_dump(by_alias=True)``) so a
dispatcher can forward them as-is.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class TextPayload(BaseModel):
    """A text content block."""

    type: Literal["text"] = "text"
    text: str = Field(..., description="Text content")


class ActionDescriptor(BaseModel):
    """Client-facing description of an action."""

    name: str = Field(..., description="Prefixed action name")
    description: str = Field(..., description="Human-readable summary")
    input_schema: Dict[str, Any] = Field(..., alias="inputSchema", description="JSON schema of the arguments")
    output_schema: Dict[str, Any] = Field(..., alias="outputSchema", description="JSON schema of the result")

    model_config = ConfigDict(populate_by_name=True)


class ListActionsResult(BaseModel):
    actions: List[ActionDescriptor] = Field(default_factory=list)


class InvokeActionResult(BaseModel):
    """Response envelope of an action call.

    Failed invocations still produce this envelope: ``is_error`` is set and the
    text payload describes the error.
    """

    content: List[TextPayload] = Field(default_factory=list)
    structured: Optional[Dict[str, Any]] = Field(
        default=None, alias="structuredContent", description="Result object when the action returned one"
    )
    is_error: bool = Field(default=False, alias="isError")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def payload(self) -> str:
        """Text of the first content block."""
        return self.content[0].text if self.content else ""


class TemplateArgument(BaseModel):
    """The single ``args`` parameter every template advertises."""

    name: str = "args"
    description: str = "Prompt arguments"
    json_schema: Dict[str, Any] = Field(..., alias="schema")
    required: bool = True

    model_config = ConfigDict(populate_by_name=True)


class TemplateDescriptor(BaseModel):
    """Client-facing description of a template."""

    name: str = Field(..., description="Prefixed template name")
    description: str = Field(..., description="Human-readable summary")
    args_schema: Dict[str, Any] = Field(..., alias="argsSchema", description="JSON schema of the arguments")
    arguments: List[TemplateArgument] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class ListTemplatesResult(BaseModel):
    templates: List[TemplateDescriptor] = Field(default_factory=list)


class TemplateMessage(BaseModel):
    """A message produced by a template."""

    role: Literal["user", "assistant"] = Field(..., description="Message author role")
    content: TextPayload

    @classmethod
    def user(cls, text: str) -> "TemplateMessage":
        return cls(role="user", content=TextPayload(text=text))


class GenerateTemplateResult(BaseModel):
    description: Optional[str] = None
    messages: List[TemplateMessage] = Field(default_factory=list)
