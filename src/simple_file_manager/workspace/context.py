"""Workspace contexts threaded through every tool handler.

A context answers two questions for a handler: where does a caller-supplied
file name live, and in which directory should git run.  Exactly one context
exists per server process and its kind is fixed by configuration:

* ``DirectContext`` resolves paths against the process working directory
  with no containment check.  Git runs in ``repoPath`` or the working
  directory.
* ``IsolatedWorkspace`` confines file names to a single active workspace
  directory created by ``initialize``.  Git runs in that directory.
"""

from __future__ import annotations

import logging
import os
import shutil
import uuid
from typing import Protocol

from ..errors import InitializationError, NotInitialized
from ..git.runner import GitRunner
from ..policy.paths import resolve_path

logger = logging.getLogger(__name__)


class WorkspaceContext(Protocol):
    """Interface shared by both workspace models."""

    runner: GitRunner
    isolated: bool

    def resolve_file(self, path: str) -> str:
        ...

    def resolve_dir(self, path: str | None) -> str:
        ...

    def repo_dir(self, repo_path: str | None) -> str:
        ...


class DirectContext:
    """Unconstrained context rooted at the process working directory."""

    isolated = False

    def __init__(self, runner: GitRunner | None = None) -> None:
        self.runner = runner or GitRunner()

    def resolve_file(self, path: str) -> str:
        return resolve_path(path)

    def resolve_dir(self, path: str | None) -> str:
        return resolve_path(path) if path else os.getcwd()

    def repo_dir(self, repo_path: str | None) -> str:
        """Resolve ``repoPath``, defaulting to the current working directory."""
        return resolve_path(repo_path) if repo_path else os.getcwd()


class IsolatedWorkspace:
    """A single active workspace directory under a fixed root.

    ``initialize`` is not idempotent: each call creates a new workspace,
    moves everything else under the root (including earlier workspaces) into
    it and makes it the active one.
    """

    isolated = True

    def __init__(self, root: str, runner: GitRunner | None = None) -> None:
        self.root = os.path.abspath(root)
        self.runner = runner or GitRunner()
        self.active_id: str | None = None

    def workspace_dir(self) -> str:
        """Return the active workspace directory or raise ``NotInitialized``."""
        if self.active_id is None:
            raise NotInitialized()
        return os.path.join(self.root, self.active_id)

    def resolve_file(self, path: str) -> str:
        return resolve_path(path, root=self.workspace_dir())

    def resolve_dir(self, path: str | None) -> str:
        return self.workspace_dir()

    def repo_dir(self, repo_path: str | None) -> str:
        return self.workspace_dir()

    def initialize(self) -> str:
        """Create a fresh workspace, adopt loose files and activate it.

        :return: the new workspace identifier
        :raises InitializationError: if any step fails; the active
            identifier is cleared in that case
        """
        workspace_id = uuid.uuid4().hex
        target = os.path.join(self.root, workspace_id)

        try:
            os.makedirs(self.root, exist_ok=True)
            try:
                os.mkdir(target)
            except FileExistsError as exc:
                raise InitializationError(f"Workspace '{workspace_id}' already exists") from exc

            moved = 0
            for entry in os.listdir(self.root):
                if entry == workspace_id:
                    continue
                shutil.move(os.path.join(self.root, entry), os.path.join(target, entry))
                moved += 1
        except InitializationError:
            self.active_id = None
            raise
        except OSError as exc:
            self.active_id = None
            raise InitializationError(f"Failed to initialize workspace: {exc}") from exc

        self.active_id = workspace_id
        logger.info("Initialized workspace %s (adopted %d entries)", workspace_id, moved)
        return workspace_id
