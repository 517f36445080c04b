"""Bundled capabilities and the bootstrap that registers them.

Capability modules only declare bindings; nothing is registered at import
time. ``load_capabilities`` is the single place where bindings reach a
registry, so the catalog does not depend on import order.
"""

from __future__ import annotations

from typing import Iterable, Optional

from capmesh.core.logging_config import get_logger
from capmesh.registry import ActionBinding, Registry, TemplateBinding

from .actions import ACTIONS
from .templates import TEMPLATES

logger = get_logger(__name__)


def load_capabilities(
    registry: Registry,
    *,
    actions: Optional[Iterable[ActionBinding]] = None,
    templates: Optional[Iterable[TemplateBinding]] = None,
) -> Registry:
    """
    Register capability bindings on ``registry``.

    Args:
        registry: The registry to populate.
        actions: Action bindings to register (defaults to the bundled actions).
        templates: Template bindings to register (defaults to the bundled templates).

    Returns:
        The same registry, for chaining.
    """
    for action in ACTIONS if actions is None else actions:
        registry.register_action(action.definition, action.behavior)
    for template in TEMPLATES if templates is None else templates:
        registry.register_template(template.definition, template.generator)
    logger.info(f"Loaded {len(registry.actions)} tools and {len(registry.templates)} prompts")
    return registry


__all__ = ["ACTIONS", "TEMPLATES", "load_capabilities"]
