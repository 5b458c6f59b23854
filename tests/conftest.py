"""Pytest configuration and fixtures for SimpleFileManager tests.

This module provides a FakeRunner that records git invocations without
spawning processes, workspace contexts rooted in temporary directories, and
a throwaway git repository for integration tests.
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Iterable, Sequence
from pathlib import Path

import pytest

from simple_file_manager.errors import CommandFailed
from simple_file_manager.git.runner import GitOutput
from simple_file_manager.workspace import DirectContext, IsolatedWorkspace


class FakeRunner:
    """A fake git runner for testing that records every call.

    This is ONLY for testing - not used in production.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, object]] = []
        self.outputs: list[GitOutput] = []
        self.fail_with: str | None = None

    def run(self, argv: Sequence[str], cwd: str, secrets: Iterable[str] = ()) -> GitOutput:
        self.calls.append({"argv": list(argv), "cwd": cwd, "secrets": list(secrets)})
        if self.fail_with is not None:
            raise CommandFailed(self.fail_with)
        if self.outputs:
            return self.outputs.pop(0)
        return GitOutput(stdout="", stderr="")

    @property
    def argvs(self) -> list[list[str]]:
        return [call["argv"] for call in self.calls]  # type: ignore[misc]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def direct_context(fake_runner: FakeRunner) -> DirectContext:
    return DirectContext(runner=fake_runner)  # type: ignore[arg-type]


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    return tmp_path / "workspace"


@pytest.fixture
def isolated_workspace(workspace_root: Path, fake_runner: FakeRunner) -> IsolatedWorkspace:
    return IsolatedWorkspace(str(workspace_root), runner=fake_runner)  # type: ignore[arg-type]


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Set up basic test environment."""
    # Commits in throwaway repositories need an identity
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@test.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@test.com")
    # Never let a developer's remote credentials leak into a test
    monkeypatch.delenv("GIT_REPO_URL", raising=False)
    monkeypatch.delenv("GIT_TOKEN", raising=False)


def _git(repo: Path, *args: str) -> str:
    proc = subprocess.run(
        ["git", *args],
        cwd=str(repo),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        check=True,
    )
    return proc.stdout


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a git repository with one commit and return its path."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "commit.gpgsign", "false")
    (repo / "README.md").write_text("# Test Repo\n", encoding="utf-8")
    _git(repo, "add", "README.md")
    _git(repo, "commit", "-q", "-m", "Initial commit")
    return repo


@pytest.fixture
def git():
    """Expose the plain git helper for assertions against a repository."""
    return _git
