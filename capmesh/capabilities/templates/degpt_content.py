"""Prompt that strips common LLM/GPT language patterns from a text."""

from typing import List

from pydantic import BaseModel, Field

from capmesh.registry import PydanticSchema, TemplateBinding, TemplateDefinition, TemplateMessage


class DegptContentArgs(BaseModel):
    """Arguments schema for the degpt-content prompt."""

    content: str = Field(..., description="Text content to process")


PROMPT_TEXT = """Review and revise this text to remove common AI language patterns like:
- Phrases that start with "This isn't X, it's Y"
- Marketing buzzwords like "game changer", "revolutionary", "groundbreaking"
- Overly enthusiastic or artificial-sounding language
- Repetitive acknowledgments and confirmations
- Unnecessarily formal or robotic transitions

Here is the text to process:

{content}

Provide the revised text with natural, straightforward language."""


async def degpt_content(args: DegptContentArgs) -> List[TemplateMessage]:
    return [TemplateMessage.user(PROMPT_TEXT.format(content=args.content))]


degpt_content_template = TemplateBinding(
    definition=TemplateDefinition(
        name="degpt-content",
        description="Remove common LLM/GPT language patterns and mannerisms from text",
        args_schema=PydanticSchema(DegptContentArgs),
    ),
    generator=degpt_content,
)
