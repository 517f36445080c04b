"""Bundled prompt templates."""

from .degpt_content import degpt_content_template
from .git_workflow import git_workflow_template

TEMPLATES = [degpt_content_template, git_workflow_template]

__all__ = ["TEMPLATES", "degpt_content_template", "git_workflow_template"]
