"""Git command runner.

Commands are built by joining ``git`` and the argument vector with single
spaces and handed to the shell.  Arguments are NOT quoted: callers must
escape anything that may contain shell metacharacters themselves.  Only the
commit message is escaped today (see ``tools.git_tools.git_commit``); file
names, branch names and worktree paths reach the shell verbatim.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..errors import CommandFailed
from ..policy.redaction import redact_secrets

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitOutput:
    """Buffered output of a finished git process."""

    stdout: str
    stderr: str


class GitRunner:
    """Run git subcommands in a given working directory."""

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    def _prepare_env(self) -> dict[str, str]:
        """Environment for git: inherit ours, never prompt on the terminal."""
        env = dict(os.environ)
        # Disable git terminal prompts - prevents hangs if auth fails
        env["GIT_TERMINAL_PROMPT"] = "0"
        return env

    def run(
        self,
        argv: Sequence[str],
        cwd: str,
        secrets: Iterable[str] = (),
    ) -> GitOutput:
        """Run ``git <argv...>`` in ``cwd`` and return its output.

        :param argv: git arguments, already escaped for the shell
        :param cwd: working directory for the child process
        :param secrets: values to redact from logs and error messages
        :raises CommandFailed: on a non-zero exit or when git cannot be spawned
        """
        secrets = list(secrets)
        command = " ".join([self.executable, *argv])
        logger.debug("Running %s in %s", redact_secrets(command, secrets), cwd)

        try:
            proc = subprocess.run(
                command,
                shell=True,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                env=self._prepare_env(),
            )
        except OSError as exc:
            raise CommandFailed(redact_secrets(str(exc), secrets)) from exc

        if proc.returncode != 0:
            message = f"Command failed: {command}\n{proc.stderr}"
            raise CommandFailed(redact_secrets(message, secrets).rstrip())

        return GitOutput(stdout=proc.stdout or "", stderr=proc.stderr or "")
