"""Configuration loading for the SimpleFileManager MCP server.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates a `Config` object.

Optional variables with defaults:
- WORKSPACE_MODE (default: 'direct'; 'isolated' enables initialize_work)
- WORKSPACE_ROOT (default: '/workspace')
- LOG_LEVEL (default: 'INFO')

The repository URL and token consumed by ``git_remote_set_url_from_env`` are
read at call time, not here, so that rotating them does not need a restart.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_WORKSPACE_MODE,
    DEFAULT_WORKSPACE_ROOT,
    WORKSPACE_MODE_DIRECT,
    WORKSPACE_MODE_ISOLATED,
)

_MODES = (WORKSPACE_MODE_DIRECT, WORKSPACE_MODE_ISOLATED)


@dataclass
class Config:
    """Configuration values loaded from the environment."""

    workspace_mode: str = WORKSPACE_MODE_DIRECT
    workspace_root: str = DEFAULT_WORKSPACE_ROOT
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def isolated(self) -> bool:
        return self.workspace_mode == WORKSPACE_MODE_ISOLATED

    @classmethod
    def load_from_env(cls) -> Config:
        """Load configuration from environment variables.

        The `.env` file is loaded if present.  Raises `RuntimeError` if
        ``WORKSPACE_MODE`` names an unknown mode.
        """
        load_dotenv()

        workspace_mode = os.getenv("WORKSPACE_MODE", DEFAULT_WORKSPACE_MODE).strip().lower()
        if workspace_mode not in _MODES:
            raise RuntimeError(
                f"Invalid WORKSPACE_MODE '{workspace_mode}'; expected one of: {', '.join(_MODES)}"
            )

        workspace_root = os.getenv("WORKSPACE_ROOT") or DEFAULT_WORKSPACE_ROOT
        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

        return cls(
            workspace_mode=workspace_mode,
            workspace_root=workspace_root,
            log_level=log_level,
        )
