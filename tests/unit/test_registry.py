"""Unit tests for the tool registry and dispatcher."""

import pytest
from mcp.types import CallToolResult
from pydantic import BaseModel, Field

from simple_file_manager.errors import InvalidArguments, NotFound, UnknownTool
from simple_file_manager.tools import build_registry, text_result
from simple_file_manager.tools.registry import ToolRegistry


class EchoArgs(BaseModel):
    text: str = Field(description="Text to echo")
    times: int = 1


def echo(ctx, args: EchoArgs) -> str:
    return args.text * args.times


def explode(ctx, args: EchoArgs) -> str:
    raise NotFound(f"nothing called {args.text}")


@pytest.fixture
def registry(direct_context):
    reg = ToolRegistry(direct_context)
    reg.register("echo", "Echo text", EchoArgs, echo, "Error echoing")
    reg.register("explode", "Always fails", EchoArgs, explode, "Error exploding")
    return reg


def _text(result: CallToolResult) -> str:
    return result.content[0].text


def test_dispatch_success_defaults_is_error_false(registry):
    result = registry.dispatch("echo", {"text": "ab", "times": 2})

    assert result.isError is False
    assert len(result.content) == 1
    assert _text(result) == "abab"


def test_dispatch_applies_defaults(registry):
    assert _text(registry.dispatch("echo", {"text": "x"})) == "x"


def test_dispatch_unknown_tool_raises_and_keeps_others(registry):
    with pytest.raises(UnknownTool, match="Unknown tool: nope"):
        registry.dispatch("nope", {})

    assert "echo" in registry
    assert _text(registry.dispatch("echo", {"text": "still here"})) == "still here"


def test_dispatch_invalid_arguments_lists_fields(registry):
    with pytest.raises(InvalidArguments) as excinfo:
        registry.dispatch("echo", {"times": "many"})

    assert set(excinfo.value.fields) == {"text", "times"}
    assert "echo" in str(excinfo.value)


def test_handler_error_is_wrapped(registry):
    """Handler failures never propagate; they become isError results."""
    result = registry.dispatch("explode", {"text": "ghost"})

    assert result.isError is True
    assert _text(result) == "Error exploding: nothing called ghost"


def test_handler_may_return_full_result(direct_context):
    reg = ToolRegistry(direct_context)
    reg.register("custom", "Custom result", EchoArgs, lambda ctx, args: text_result("raw", is_error=True))

    result = reg.dispatch("custom", {"text": "x"})
    assert result.isError is True
    assert _text(result) == "raw"


def test_register_twice_replaces_previous(registry):
    registry.register("echo", "Shout", EchoArgs, lambda ctx, args: args.text.upper())

    assert _text(registry.dispatch("echo", {"text": "hi"})) == "HI"
    assert len([d for d in registry.list_tools() if d.name == "echo"]) == 1


def test_default_error_prefix(direct_context):
    reg = ToolRegistry(direct_context)
    descriptor = reg.register("thing", "Thing", EchoArgs, explode)
    assert descriptor.error_prefix == "Error running thing"


def test_direct_catalogue(direct_context):
    registry = build_registry(direct_context)
    names = {d.name for d in registry.list_tools()}

    assert "initialize_work" not in names
    assert {
        "read_file", "write_file", "delete_file", "list_dir",
        "git_status", "git_diff", "git_add", "git_commit", "git_log",
        "git_branch_create", "git_branch_create_and_push", "git_branch_delete",
        "git_worktree_list", "git_worktree_add", "git_worktree_remove",
        "git_remote_set_url_from_env",
    } == names


def test_isolated_catalogue(isolated_workspace):
    registry = build_registry(isolated_workspace)
    names = {d.name for d in registry.list_tools()}

    assert "initialize_work" in names
    assert len(names) == 17


def test_mcp_schema_uses_wire_names(direct_context):
    registry = build_registry(direct_context)

    branch_schema = registry.get("git_branch_create").to_mcp_tool().inputSchema
    assert {"branch", "startPoint", "repoPath"} <= set(branch_schema["properties"])
    assert branch_schema["required"] == ["branch"]

    read_schema = registry.get("read_file").to_mcp_tool().inputSchema
    assert read_schema["required"] == ["path"]


def test_isolated_schema_has_no_repo_path(isolated_workspace):
    registry = build_registry(isolated_workspace)

    status_schema = registry.get("git_status").to_mcp_tool().inputSchema
    assert "repoPath" not in status_schema.get("properties", {})

    read_schema = registry.get("read_file").to_mcp_tool().inputSchema
    assert read_schema["required"] == ["name"]
