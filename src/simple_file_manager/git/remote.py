"""Authenticated remote URL construction."""

from __future__ import annotations

import re

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def authenticated_url(repo_url: str, token: str) -> str:
    """Return ``https://<token>@<host-and-path>`` for ``repo_url``.

    Any scheme and any credentials already embedded in ``repo_url`` are
    dropped, so ``https://old@github.com/o/r.git`` and ``github.com/o/r.git``
    both yield ``https://<token>@github.com/o/r.git``.
    """
    host_and_path = _SCHEME.sub("", repo_url.strip())
    # Strip existing userinfo, which can only appear before the first slash
    authority, sep, rest = host_and_path.partition("/")
    if "@" in authority:
        authority = authority.rsplit("@", 1)[1]
    return f"https://{token}@{authority}{sep}{rest}"
