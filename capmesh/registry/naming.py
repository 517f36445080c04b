"""Capability naming.

Every capability is exposed on the wire under its declared name prefixed with
a single namespace token and an underscore (``"add"`` -> ``"mcp_add"``). An
absent prefix leaves names unchanged.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NamingConfig(BaseModel):
    """Namespace configuration applied to capability names."""

    prefix: Optional[str] = Field(default=None, description="Namespace token, None disables prefixing")

    model_config = ConfigDict(frozen=True)

    def apply(self, name: str) -> str:
        """Return the wire name for a declared capability name."""
        if not self.prefix:
            return name
        return f"{self.prefix}_{name}"
