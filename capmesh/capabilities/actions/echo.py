"""Echo a message back to the caller."""

from pydantic import BaseModel, ConfigDict, Field

from capmesh.registry import ActionBinding, ActionDefinition, PydanticSchema


class EchoInput(BaseModel):
    """Input schema for the echo action."""

    message: str = Field(..., description="Message to echo")

    model_config = ConfigDict(strict=True)


class EchoOutput(BaseModel):
    """Output schema for the echo action."""

    message: str = Field(..., description="The echoed message")


async def echo(args: EchoInput) -> EchoOutput:
    return EchoOutput(message=args.message)


echo_action = ActionBinding(
    definition=ActionDefinition(
        name="echo",
        description="Echoes back the input",
        input_schema=PydanticSchema(EchoInput),
        output_schema=PydanticSchema(EchoOutput),
    ),
    behavior=echo,
)
