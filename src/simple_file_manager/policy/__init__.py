"""Policy utilities: path containment and secret redaction."""

from .paths import resolve_path
from .redaction import redact_secrets

__all__ = [
    "resolve_path",
    "redact_secrets",
]
