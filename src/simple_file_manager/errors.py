"""Error kinds raised by tool handlers and the dispatcher.

Errors carry only a human-readable message.  Callers of the MCP surface see
that message inside an ``isError`` result and must match on its text.
"""

from __future__ import annotations


class ToolError(Exception):
    """Base class for every error raised by this package."""


class NotFound(ToolError):
    """A file or directory does not exist."""


class InvalidPath(ToolError):
    """A path escapes its permitted root or is otherwise unusable."""


class InvalidArguments(ToolError):
    """Tool arguments do not match the declared input shape."""

    def __init__(self, tool: str, fields: list[str], detail: str = "") -> None:
        self.tool = tool
        self.fields = fields
        message = f"Invalid arguments for tool '{tool}': {', '.join(fields)}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnknownTool(ToolError):
    """No tool is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class CommandFailed(ToolError):
    """A git subprocess exited non-zero or could not be spawned."""


class NotInitialized(ToolError):
    """A workspace-scoped operation ran before initialize_work."""

    def __init__(self) -> None:
        super().__init__("Workspace not initialized; call initialize_work first")


class InitializationError(ToolError):
    """Creating or populating a new workspace failed."""


class MissingConfig(ToolError):
    """A required environment variable is absent."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"Missing required environment variable: {variable}")
