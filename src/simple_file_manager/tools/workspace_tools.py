"""Workspace tool implementations.

Only the isolated workspace model exposes these.  ``initialize_work``
creates a new workspace directory, adopts whatever already sits under the
workspace root and makes the new directory the target of every later call.
"""

from __future__ import annotations

from pydantic import BaseModel

from ..workspace.context import IsolatedWorkspace


def initialize_work(ctx: IsolatedWorkspace, args: BaseModel) -> str:
    """Create and activate a new workspace; return its identifier."""
    workspace_id = ctx.initialize()
    return f"Initialized workspace {workspace_id} at {ctx.workspace_dir()}"
