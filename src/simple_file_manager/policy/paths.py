"""Path resolution for tool arguments.

Two modes are supported.  Without a root, paths resolve against the process
working directory with no containment check at all.  With a root, the input
is treated as a name inside that root and must stay strictly below it after
normalization.
"""

from __future__ import annotations

import os

from ..errors import InvalidPath


def resolve_path(path: str, root: str | None = None) -> str:
    """Return the absolute path for ``path``.

    :param path: caller-supplied path, or a bare name when ``root`` is given
    :param root: directory the result must stay strictly inside
    :raises InvalidPath: if ``path`` escapes ``root`` or resolves to it
    """
    if root is None:
        return os.path.abspath(path)

    norm_root = os.path.normpath(os.path.abspath(root))
    candidate = os.path.normpath(os.path.join(norm_root, path))

    # Strict descendant only; the root itself is not a valid target
    if not candidate.startswith(norm_root + os.sep):
        raise InvalidPath(f"Path '{path}' escapes workspace root")

    return candidate
