"""Git tool implementations.

Each handler maps to one fixed git argument template (two for
``git_branch_create_and_push``) and runs it through the context's
``GitRunner`` in the repository directory chosen by the context.  In the
direct model that is ``repoPath`` or the working directory; in the isolated
model it is always the active workspace.

Arguments are joined into a shell command line without quoting.  Only the
commit message is escaped.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field, create_model

from ..constants import DEFAULT_LOG_LIMIT, GIT_REMOTE_NAME, REPO_URL_ENV_VAR, TOKEN_ENV_VAR
from ..errors import MissingConfig
from ..git.remote import authenticated_url
from ..workspace.context import WorkspaceContext

logger = logging.getLogger(__name__)


class GitArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class GitDiffArgs(GitArgs):
    staged: bool | None = Field(None, description="Whether to show staged changes")
    file: str | None = Field(None, description="Specific file to diff")


class GitAddArgs(GitArgs):
    files: list[str] = Field(description="List of files to add")


class GitCommitArgs(GitArgs):
    message: str = Field(description="Commit message")


class GitLogArgs(GitArgs):
    limit: int = Field(DEFAULT_LOG_LIMIT, description="Number of commits to show")


class GitBranchCreateArgs(GitArgs):
    branch: str = Field(description="Branch name to create")
    start_point: str | None = Field(
        None,
        alias="startPoint",
        description="Optional start point (commit, tag, or branch)",
    )


class GitBranchDeleteArgs(GitArgs):
    branch: str = Field(description="Branch to delete")
    force: bool | None = Field(None, description="Force deletion of the branch")


class GitWorktreeAddArgs(GitArgs):
    path: str = Field(description="Path for the new worktree")
    branch: str = Field(description="Branch to check out in the worktree")


class GitWorktreeRemoveArgs(GitArgs):
    path: str = Field(description="Path of the worktree to remove")


def with_repo_path(model: type[GitArgs]) -> type[GitArgs]:
    """Return a subclass of ``model`` that also accepts ``repoPath``."""
    name = model.__name__.replace("Args", "") + "RepoArgs"
    return create_model(
        name,
        __base__=model,
        repo_path=(
            str | None,
            Field(
                None,
                alias="repoPath",
                description="Path to the git repository (defaults to current working directory)",
            ),
        ),
    )


def _git(
    ctx: WorkspaceContext,
    args: BaseModel,
    argv: Sequence[str],
    secrets: Iterable[str] = (),
) -> str:
    cwd = ctx.repo_dir(getattr(args, "repo_path", None))
    return ctx.runner.run(argv, cwd, secrets=secrets).stdout


def git_status(ctx: WorkspaceContext, args: GitArgs) -> str:
    return _git(ctx, args, ["status"])


def git_diff(ctx: WorkspaceContext, args: GitDiffArgs) -> str:
    argv = ["diff"]
    if args.staged:
        argv.append("--staged")
    if args.file:
        argv.append(args.file)
    return _git(ctx, args, argv)


def git_add(ctx: WorkspaceContext, args: GitAddArgs) -> str:
    _git(ctx, args, ["add", *args.files])
    return f"Successfully added: {', '.join(args.files)}"


def git_commit(ctx: WorkspaceContext, args: GitCommitArgs) -> str:
    """Commit staged changes.

    The message is wrapped in double quotes for the shell, with embedded
    double quotes escaped as ``\\"``.
    """
    escaped = args.message.replace('"', '\\"')
    return _git(ctx, args, ["commit", "-m", f'"{escaped}"'])


def git_log(ctx: WorkspaceContext, args: GitLogArgs) -> str:
    return _git(ctx, args, ["log", "-n", str(args.limit)])


def git_branch_create(ctx: WorkspaceContext, args: GitBranchCreateArgs) -> str:
    argv = ["branch", args.branch]
    if args.start_point:
        argv.append(args.start_point)
    return _git(ctx, args, argv)


def git_branch_create_and_push(ctx: WorkspaceContext, args: GitBranchCreateArgs) -> str:
    """Create a branch, switch to it and push it upstream to ``origin``."""
    argv = ["checkout", "-b", args.branch]
    if args.start_point:
        argv.append(args.start_point)
    _git(ctx, args, argv)
    cwd = ctx.repo_dir(getattr(args, "repo_path", None))
    pushed = ctx.runner.run(["push", "-u", GIT_REMOTE_NAME, args.branch], cwd)
    summary = f"Created branch {args.branch} and pushed to {GIT_REMOTE_NAME}"
    details = (pushed.stdout + pushed.stderr).strip()
    return f"{summary}\n{details}" if details else summary


def git_branch_delete(ctx: WorkspaceContext, args: GitBranchDeleteArgs) -> str:
    flag = "-D" if args.force else "-d"
    return _git(ctx, args, ["branch", flag, args.branch])


def git_worktree_list(ctx: WorkspaceContext, args: GitArgs) -> str:
    return _git(ctx, args, ["worktree", "list"])


def git_worktree_add(ctx: WorkspaceContext, args: GitWorktreeAddArgs) -> str:
    output = _git(ctx, args, ["worktree", "add", args.path, args.branch])
    return output or f"Added worktree {args.path} for branch {args.branch}"


def git_worktree_remove(ctx: WorkspaceContext, args: GitWorktreeRemoveArgs) -> str:
    output = _git(ctx, args, ["worktree", "remove", args.path])
    return output or f"Removed worktree {args.path}"


def git_remote_set_url_from_env(ctx: WorkspaceContext, args: GitArgs) -> str:
    """Point ``origin`` at the repository URL from the environment, with the token embedded.

    The token never appears in the returned text or in logs.
    """
    repo_url = os.environ.get(REPO_URL_ENV_VAR)
    if not repo_url:
        raise MissingConfig(REPO_URL_ENV_VAR)
    token = os.environ.get(TOKEN_ENV_VAR)
    if not token:
        raise MissingConfig(TOKEN_ENV_VAR)

    url = authenticated_url(repo_url, token)
    _git(ctx, args, ["remote", "set-url", GIT_REMOTE_NAME, url], secrets=[token])
    logger.info("Updated %s remote URL from %s", GIT_REMOTE_NAME, REPO_URL_ENV_VAR)
    return f"Updated {GIT_REMOTE_NAME} remote URL from {REPO_URL_ENV_VAR}"
