"""Git command execution over the git command-line interface."""

from .remote import authenticated_url
from .runner import GitOutput, GitRunner

__all__ = ["GitOutput", "GitRunner", "authenticated_url"]
