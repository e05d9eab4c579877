"""Tool registry: single source of truth for the MCP tool definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any


@dataclass
class ToolSpec:
    """Declarative specification for a single MCP tool."""

    name: str
    description: str
    handler: Callable[..., Any]
    category: str = "general"


TOOL_REGISTRY: dict[str, ToolSpec] = {}


def register_tool(
    name: str,
    description: str,
    handler: Callable[..., Any],
    *,
    category: str = "general",
) -> None:
    """Register a tool in the global registry."""
    TOOL_REGISTRY[name] = ToolSpec(
        name=name,
        description=description,
        handler=handler,
        category=category,
    )
