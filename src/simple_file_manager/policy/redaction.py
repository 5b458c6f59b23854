"""Secret redaction utilities.

This module removes access tokens from text before it reaches logs or tool
results.  Redaction is a simple string replacement that substitutes secrets
with the string ``"<REDACTED>"``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_TOKEN_PATTERNS = [
    # GitHub personal access tokens: ghp_xxx or github_pat_xxx
    re.compile(r"gh[pousr]_[A-Za-z0-9]{30,}", re.IGNORECASE),
    re.compile(r"github_pat_[A-Za-z0-9_]{20,}", re.IGNORECASE),
    # Credentials embedded in an HTTPS remote URL
    re.compile(r"(?<=https://)[^/@\s]+(?=@)", re.IGNORECASE),
]


def redact_secrets(text: str, secrets: Iterable[str] = ()) -> str:
    """Return ``text`` with secrets and common token patterns replaced.

    :param text: arbitrary text that may contain secrets
    :param secrets: explicit secret strings to redact
    :return: redacted text
    """
    redacted = text or ""
    for secret in secrets:
        if secret:
            redacted = redacted.replace(secret, "<REDACTED>")
    for pattern in _TOKEN_PATTERNS:
        redacted = pattern.sub("<REDACTED>", redacted)
    return redacted
