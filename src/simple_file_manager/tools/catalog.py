"""Tool catalogue assembly.

``build_registry`` declares every tool once for the given context.  The
input shapes depend on the workspace model: the direct model takes
``path`` and ``repoPath`` arguments, the isolated model takes bare file
names and always runs git in the active workspace.
"""

from __future__ import annotations

import logging

from . import file_tools, git_tools, workspace_tools
from .file_tools import ListDirArgs, NameArgs, NoArgs, PathArgs, WriteNameArgs, WritePathArgs
from .git_tools import (
    GitAddArgs,
    GitArgs,
    GitBranchCreateArgs,
    GitBranchDeleteArgs,
    GitCommitArgs,
    GitDiffArgs,
    GitLogArgs,
    GitWorktreeAddArgs,
    GitWorktreeRemoveArgs,
    with_repo_path,
)
from .registry import ToolRegistry
from ..workspace.context import WorkspaceContext

logger = logging.getLogger(__name__)

# (name, handler, description, input model, error prefix)
_GIT_TOOLS = [
    ("git_status", git_tools.git_status, "Get the status of the git repository", GitArgs,
     "Error running git status"),
    ("git_diff", git_tools.git_diff, "Get git diff", GitDiffArgs,
     "Error running git diff"),
    ("git_add", git_tools.git_add, "Add files to git stage", GitAddArgs,
     "Error running git add"),
    ("git_commit", git_tools.git_commit, "Commit changes to git", GitCommitArgs,
     "Error running git commit"),
    ("git_log", git_tools.git_log, "Show git commit log", GitLogArgs,
     "Error running git log"),
    ("git_branch_create", git_tools.git_branch_create, "Create a git branch", GitBranchCreateArgs,
     "Error creating git branch"),
    ("git_branch_create_and_push", git_tools.git_branch_create_and_push,
     "Create a git branch, check it out and push it to origin", GitBranchCreateArgs,
     "Error creating and pushing git branch"),
    ("git_branch_delete", git_tools.git_branch_delete, "Delete a git branch", GitBranchDeleteArgs,
     "Error deleting git branch"),
    ("git_worktree_list", git_tools.git_worktree_list, "List git worktrees", GitArgs,
     "Error listing git worktrees"),
    ("git_worktree_add", git_tools.git_worktree_add, "Add a git worktree for a branch",
     GitWorktreeAddArgs, "Error adding git worktree"),
    ("git_worktree_remove", git_tools.git_worktree_remove, "Remove a git worktree",
     GitWorktreeRemoveArgs, "Error removing git worktree"),
    ("git_remote_set_url_from_env", git_tools.git_remote_set_url_from_env,
     "Set the origin remote URL from the repository URL and token in the environment", GitArgs,
     "Error setting git remote URL"),
]


def build_registry(context: WorkspaceContext) -> ToolRegistry:
    """Return a registry holding the full tool catalogue for ``context``."""
    registry = ToolRegistry(context)

    if context.isolated:
        file_args, write_args, list_args = NameArgs, WriteNameArgs, NoArgs
    else:
        file_args, write_args, list_args = PathArgs, WritePathArgs, ListDirArgs

    registry.register("read_file", "Read the content of a file", file_args,
                      file_tools.read_file, "Error reading file")
    registry.register("write_file", "Write content to a file", write_args,
                      file_tools.write_file, "Error writing file")
    registry.register("delete_file", "Delete a file", file_args,
                      file_tools.delete_file, "Error deleting file")
    registry.register("list_dir", "List files and folders from a path", list_args,
                      file_tools.list_dir, "Error listing directory")

    for name, handler, description, model, error_prefix in _GIT_TOOLS:
        if not context.isolated:
            model = with_repo_path(model)
        registry.register(name, description, model, handler, error_prefix)

    if context.isolated:
        registry.register(
            "initialize_work",
            "Create a fresh workspace, move existing files into it and make it active",
            NoArgs,
            workspace_tools.initialize_work,
            "Error initializing workspace",
        )

    logger.debug("Built catalogue of %d tools (isolated=%s)", len(registry), context.isolated)
    return registry
