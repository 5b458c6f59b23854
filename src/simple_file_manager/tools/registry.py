"""Tool registry and dispatcher.

Each tool is declared once with a name, a description, a pydantic model for
its input shape and a handler.  ``ToolRegistry.dispatch`` validates incoming
arguments against that model and runs the handler through ``invoke_tool``,
which is the only place handler failures are turned into ``isError``
results.  Handlers therefore raise freely and return plain strings.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mcp.types import CallToolResult, TextContent, Tool
from pydantic import BaseModel, ValidationError

from ..errors import InvalidArguments, UnknownTool
from ..workspace.context import WorkspaceContext

logger = logging.getLogger(__name__)

ToolHandler = Callable[[WorkspaceContext, Any], "str | CallToolResult"]


def text_result(text: str, is_error: bool = False) -> CallToolResult:
    """Wrap ``text`` in a single-item tool result."""
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


@dataclass(frozen=True)
class ToolDescriptor:
    """A registered tool.  Immutable once registered."""

    name: str
    description: str
    input_model: type[BaseModel]
    handler: ToolHandler
    error_prefix: str

    def to_mcp_tool(self) -> Tool:
        """Describe this tool the way MCP ``tools/list`` expects."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_model.model_json_schema(by_alias=True),
        )


def invoke_tool(descriptor: ToolDescriptor, context: WorkspaceContext, args: BaseModel) -> CallToolResult:
    """Run a handler and convert its outcome into a tool result.

    A string return becomes a successful text result.  Any exception becomes
    an error result whose text is ``"<error_prefix>: <error>"``.
    """
    try:
        outcome = descriptor.handler(context, args)
    except Exception as exc:
        logger.warning("Tool %s failed: %s", descriptor.name, exc)
        return text_result(f"{descriptor.error_prefix}: {exc}", is_error=True)

    if isinstance(outcome, CallToolResult):
        return outcome
    return text_result(outcome)


class ToolRegistry:
    """Registry mapping tool names to descriptors, bound to one context."""

    def __init__(self, context: WorkspaceContext) -> None:
        self.context = context
        self._tools: dict[str, ToolDescriptor] = {}

    def register(
        self,
        name: str,
        description: str,
        input_model: type[BaseModel],
        handler: ToolHandler,
        error_prefix: str | None = None,
    ) -> ToolDescriptor:
        """Register a tool.  A second registration under ``name`` replaces the first."""
        if name in self._tools:
            logger.warning("Tool %s registered twice; replacing previous definition", name)
        descriptor = ToolDescriptor(
            name=name,
            description=description,
            input_model=input_model,
            handler=handler,
            error_prefix=error_prefix or f"Error running {name}",
        )
        self._tools[name] = descriptor
        return descriptor

    def get(self, name: str) -> ToolDescriptor:
        if name not in self._tools:
            raise UnknownTool(name)
        return self._tools[name]

    def list_tools(self) -> list[ToolDescriptor]:
        return list(self._tools.values())

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def validate(self, descriptor: ToolDescriptor, arguments: dict[str, Any] | None) -> BaseModel:
        """Validate ``arguments`` against the tool's input model.

        :raises InvalidArguments: listing every field that failed validation
        """
        try:
            return descriptor.input_model.model_validate(arguments or {})
        except ValidationError as exc:
            fields = []
            for error in exc.errors():
                field = ".".join(str(part) for part in error["loc"]) or "<root>"
                if field not in fields:
                    fields.append(field)
            detail = "; ".join(f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors())
            raise InvalidArguments(descriptor.name, fields, detail) from exc

    def dispatch(self, name: str, arguments: dict[str, Any] | None = None) -> CallToolResult:
        """Look up, validate and run a tool call.

        :raises UnknownTool: if ``name`` is not registered
        :raises InvalidArguments: if ``arguments`` do not fit the input shape
        """
        descriptor = self.get(name)
        args = self.validate(descriptor, arguments)
        logger.info("Calling tool %s", name)
        return invoke_tool(descriptor, self.context, args)
