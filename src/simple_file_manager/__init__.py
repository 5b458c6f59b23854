"""Top-level package for the SimpleFileManager MCP server.

This package exposes a tools-only MCP server that lets an agent read and
write files in a workspace directory and drive the git repository inside it.
"""

__all__ = ["__version__"]
__version__ = "1.0.0"
