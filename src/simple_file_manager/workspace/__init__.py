"""Workspace contexts for the MCP server."""

from .context import DirectContext, IsolatedWorkspace, WorkspaceContext

__all__ = ["DirectContext", "IsolatedWorkspace", "WorkspaceContext"]
