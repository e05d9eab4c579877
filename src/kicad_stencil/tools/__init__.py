"""Stencil MCP tools."""

# Import modules to trigger tool registration via register_tool() calls
from . import board, stencil  # noqa: F401
from .registry import TOOL_REGISTRY, register_tool

__all__ = ["TOOL_REGISTRY", "register_tool"]
