"""Add two numbers."""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from capmesh.registry import ActionBinding, ActionDefinition, PydanticSchema


class AddInput(BaseModel):
    """Input schema for the add action."""

    a: Union[int, float] = Field(..., description="First number")
    b: Union[int, float] = Field(..., description="Second number")

    model_config = ConfigDict(strict=True)


class AddOutput(BaseModel):
    """Output schema for the add action."""

    result: Union[int, float] = Field(..., description="Sum of the two numbers")


async def add(args: AddInput) -> AddOutput:
    return AddOutput(result=args.a + args.b)


add_action = ActionBinding(
    definition=ActionDefinition(
        name="add",
        description="Adds two numbers",
        input_schema=PydanticSchema(AddInput),
        output_schema=PydanticSchema(AddOutput),
    ),
    behavior=add,
)
