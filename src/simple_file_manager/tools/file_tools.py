"""File tool implementations.

Provides handlers to read, write, delete and list files.  Paths go through
the active workspace context, so the same handlers serve both the direct
model (``path`` resolved against the working directory) and the isolated
model (``name`` confined to the active workspace).
"""

from __future__ import annotations

import logging
import os
from urllib.parse import unquote

from pydantic import BaseModel, Field

from ..errors import InvalidPath, NotFound
from ..workspace.context import WorkspaceContext

logger = logging.getLogger(__name__)

RESOURCE_URI_PREFIX = "file:///"
RESOURCE_URI_TEMPLATE = RESOURCE_URI_PREFIX + "{path}"


class PathArgs(BaseModel):
    path: str = Field(description="The path to the file")

    @property
    def target(self) -> str:
        return self.path


class NameArgs(BaseModel):
    name: str = Field(description="The file name inside the active workspace")

    @property
    def target(self) -> str:
        return self.name


class WritePathArgs(PathArgs):
    content: str = Field(description="The content to write to the file")


class WriteNameArgs(NameArgs):
    content: str = Field(description="The content to write to the file")


class ListDirArgs(BaseModel):
    path: str = Field(description="The directory path to list")


class NoArgs(BaseModel):
    pass


def _read_text(path: str) -> str:
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as f:
            return f.read()
    except FileNotFoundError as exc:
        raise NotFound(str(exc)) from exc


def read_file(ctx: WorkspaceContext, args: PathArgs | NameArgs) -> str:
    """Return the content of a file as text."""
    return _read_text(ctx.resolve_file(args.target))


def write_file(ctx: WorkspaceContext, args: WritePathArgs | WriteNameArgs) -> str:
    """Write ``content`` to a file, creating it or replacing what was there."""
    path = ctx.resolve_file(args.target)
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(args.content)
    except FileNotFoundError as exc:
        raise NotFound(str(exc)) from exc
    return f"Successfully wrote to {args.target}"


def delete_file(ctx: WorkspaceContext, args: PathArgs | NameArgs) -> str:
    """Remove a single file."""
    path = ctx.resolve_file(args.target)
    try:
        os.unlink(path)
    except FileNotFoundError as exc:
        raise NotFound(str(exc)) from exc
    return f"Successfully deleted {args.target}"


def list_dir(ctx: WorkspaceContext, args: ListDirArgs | NoArgs) -> str:
    """List a directory as ``dir\\t<name>`` / ``file\\t<name>`` lines.

    Entries appear in the order the operating system yields them; nothing
    is sorted.
    """
    path = ctx.resolve_dir(getattr(args, "path", None))
    try:
        with os.scandir(path) as entries:
            lines = [
                f"{'dir' if entry.is_dir(follow_symlinks=False) else 'file'}\t{entry.name}"
                for entry in entries
            ]
    except FileNotFoundError as exc:
        raise NotFound(str(exc)) from exc
    return "\n".join(lines)


def read_resource(ctx: WorkspaceContext, uri: str) -> str:
    """Read a ``file:///{path}`` resource.

    Resolution matches ``read_file``.  Errors propagate unwrapped because
    resource reads are reported by the transport, not as tool results.
    """
    if not uri.startswith(RESOURCE_URI_PREFIX):
        raise InvalidPath(f"Unsupported resource URI: {uri}")
    target = unquote(uri[len(RESOURCE_URI_PREFIX):])
    if not target:
        raise InvalidPath(f"Resource URI has no path: {uri}")
    logger.info("Reading resource %s", uri)
    return _read_text(ctx.resolve_file(target))
