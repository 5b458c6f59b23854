"""Global constants for the SimpleFileManager MCP server.

These values serve as defaults for configuration.  Override them through
environment variables rather than editing this module.
"""

import os

# Server identity reported during the MCP handshake
SERVER_NAME = "SimpleFileManager"

# Workspace
WORKSPACE_MODE_DIRECT = "direct"
WORKSPACE_MODE_ISOLATED = "isolated"
DEFAULT_WORKSPACE_MODE = os.environ.get("WORKSPACE_MODE", WORKSPACE_MODE_DIRECT)
DEFAULT_WORKSPACE_ROOT = os.environ.get("WORKSPACE_ROOT", "/workspace")

# Git
DEFAULT_LOG_LIMIT = 10
GIT_REMOTE_NAME = "origin"

# Variables read by git_remote_set_url_from_env at call time
REPO_URL_ENV_VAR = "GIT_REPO_URL"
TOKEN_ENV_VAR = "GIT_TOKEN"

# Logging
DEFAULT_LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
