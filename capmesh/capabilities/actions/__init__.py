"""Bundled actions."""

from .add import add_action
from .echo import echo_action

ACTIONS = [add_action, echo_action]

__all__ = ["ACTIONS", "add_action", "echo_action"]
