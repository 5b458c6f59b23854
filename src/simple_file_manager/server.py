"""MCP stdio server entrypoint for SimpleFileManager.

The server runs over standard input/output using the Model Context Protocol.
It exposes the tool catalogue built by ``tools.build_registry`` and a
``file:///{path}`` resource template.  Calls are handled one at a time;
handlers run synchronously, so a slow disk or git process holds up the
server until it finishes.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from . import __version__
from .config import Config
from .constants import DEFAULT_LOG_LEVEL, SERVER_NAME
from .errors import InvalidArguments, ToolError, UnknownTool
from .tools import build_registry, file_tools
from .tools.registry import ToolRegistry, text_result
from .workspace import DirectContext, IsolatedWorkspace, WorkspaceContext

logger = logging.getLogger(__name__)


def build_context(config: Config) -> WorkspaceContext:
    """Return the workspace context selected by ``config.workspace_mode``."""
    if config.isolated:
        return IsolatedWorkspace(config.workspace_root)
    return DirectContext()


def call_tool_envelope(registry: ToolRegistry, name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
    """Dispatch a call and always return a result envelope.

    Unknown tools and invalid arguments become ``isError`` results just like
    handler failures, so no call surfaces as a protocol fault.
    """
    try:
        return registry.dispatch(name, arguments)
    except (UnknownTool, InvalidArguments) as exc:
        logger.warning("Rejected call to %s: %s", name, exc)
        return text_result(str(exc), is_error=True)


def _result_text(result: types.CallToolResult) -> str:
    return "\n".join(item.text for item in result.content if isinstance(item, types.TextContent))


def build_server(registry: ToolRegistry) -> Server:
    """Bind ``registry`` to a low-level MCP server."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [descriptor.to_mcp_tool() for descriptor in registry.list_tools()]

    # Arguments are validated by the registry against the same schema
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        result = call_tool_envelope(registry, name, arguments)
        if result.isError:
            # The SDK reports a raised exception as an isError result carrying its text
            raise ToolError(_result_text(result))
        return [item for item in result.content if isinstance(item, types.TextContent)]

    @server.list_resource_templates()
    async def list_resource_templates() -> list[types.ResourceTemplate]:
        return [
            types.ResourceTemplate(
                uriTemplate=file_tools.RESOURCE_URI_TEMPLATE,
                name="file",
                description="Read the content of a file",
                mimeType="text/plain",
            )
        ]

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        content = file_tools.read_resource(registry.context, str(uri))
        return [ReadResourceContents(content=content, mime_type="text/plain")]

    return server


async def serve(server: Server) -> None:
    """Run ``server`` over stdio until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Simple File Manager MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Entrypoint for the SimpleFileManager MCP server.

    Exits with status 1 if configuration or the transport fails.
    """
    # Configure logging to stderr (stdout is used for MCP protocol)
    logging.basicConfig(
        level=getattr(logging, DEFAULT_LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        config = Config.load_from_env()
        logging.getLogger().setLevel(getattr(logging, config.log_level, logging.INFO))
        logger.info("Starting Simple File Manager MCP server (mode=%s)", config.workspace_mode)

        registry = build_registry(build_context(config))
        logger.info("Registered %d tools", len(registry))

        asyncio.run(serve(build_server(registry)))
    except KeyboardInterrupt:
        logger.info("Shutting down")
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
