"""Prompt that turns a change description into git add/commit/push commands."""

from typing import List

from pydantic import BaseModel, Field

from capmesh.registry import PydanticSchema, TemplateBinding, TemplateDefinition, TemplateMessage


class GitWorkflowArgs(BaseModel):
    """Arguments schema for the git-workflow prompt."""

    changes: str = Field(..., description="Git diff or description of changes")


PROMPT_TEXT = (
    "Generate a concise but descriptive commit message for these changes and return the full git "
    "workflow commands:\n\n{changes}\n\n"
    "Respond with the exact commands to run in this format:\n\n"
    'git add .\ngit commit -m "{{generated commit message}}"\ngit push'
)


async def git_workflow(args: GitWorkflowArgs) -> List[TemplateMessage]:
    return [TemplateMessage.user(PROMPT_TEXT.format(changes=args.changes))]


git_workflow_template = TemplateBinding(
    definition=TemplateDefinition(
        name="git-workflow",
        description="Generate Git add, commit and push workflow commands",
        args_schema=PydanticSchema(GitWorkflowArgs),
    ),
    generator=git_workflow,
)
