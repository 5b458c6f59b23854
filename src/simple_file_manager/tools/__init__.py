"""Tool module exports for the SimpleFileManager MCP server.

This package provides submodules for each group of MCP tools plus the
registry that validates and dispatches calls to them.

Usage:

    from simple_file_manager.tools import build_registry
    registry = build_registry(DirectContext())
    registry.dispatch("read_file", {"path": "README.md"})
"""

from . import (
    file_tools,  # noqa: F401
    git_tools,  # noqa: F401
    workspace_tools,  # noqa: F401
)
from .catalog import build_registry
from .registry import ToolDescriptor, ToolRegistry, invoke_tool, text_result

__all__ = [
    "file_tools",
    "git_tools",
    "workspace_tools",
    "build_registry",
    "ToolDescriptor",
    "ToolRegistry",
    "invoke_tool",
    "text_result",
]
