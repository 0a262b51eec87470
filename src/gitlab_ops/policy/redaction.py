"""Secret redaction utilities.

GitLab error bodies and transport exceptions can echo request headers or
URLs.  This module removes credentials from such text before it is logged
or attached to an exception, substituting the string ``"<REDACTED>"``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_TOKEN_PATTERNS = [
    # GitLab personal, OAuth, runner and deploy tokens
    re.compile(r"glpat-[A-Za-z0-9_\-]{20,}", re.IGNORECASE),
    re.compile(r"gloas-[A-Za-z0-9_\-]{20,}", re.IGNORECASE),
    re.compile(r"glrt-[A-Za-z0-9_\-]{20,}", re.IGNORECASE),
    re.compile(r"gldt-[A-Za-z0-9_\-]{20,}", re.IGNORECASE),
    # Token headers echoed back verbatim
    re.compile(r"PRIVATE-TOKEN:\s*\S+", re.IGNORECASE),
    # Bearer tokens (JWT or opaque strings following 'Bearer ')
    re.compile(r"Bearer\s+[A-Za-z0-9\-\._~\+/]+=*", re.IGNORECASE),
    # Private key blocks (BEGIN/END markers)
    re.compile(r"-----BEGIN [A-Z ]+ PRIVATE KEY-----[\s\S]+?-----END [A-Z ]+ PRIVATE KEY-----", re.IGNORECASE),
]


def redact_secrets(text: str, secrets: Iterable[str]) -> str:
    """Return ``text`` with secrets and common token patterns replaced.

    :param text: arbitrary text that may contain secrets
    :param secrets: iterable of secret strings to redact
    :return: redacted text
    """
    redacted = text or ""
    for secret in secrets:
        if secret:
            redacted = redacted.replace(secret, "<REDACTED>")
    for pattern in _TOKEN_PATTERNS:
        redacted = pattern.sub("<REDACTED>", redacted)
    return redacted
