"""Tool surface shared by the MCP and HTTP servers."""

from __future__ import annotations

from .registry import ToolFunction, UnknownToolError, call_tool, get_tool, get_tools, register_tool
from .serializers import render_result
from .state import api_state

# Import tool modules so decorators run at module import time.
from . import contacts, events  # noqa: F401

__all__ = [
    "ToolFunction",
    "UnknownToolError",
    "api_state",
    "call_tool",
    "get_tool",
    "get_tools",
    "register_tool",
    "render_result",
]
