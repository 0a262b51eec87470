"""Shared client state for gitlab-ops.

This module owns the single process-wide :class:`GitLabClient` used by the
tool layer.  The handle is built lazily on first use from the environment
and reused for the rest of the process.  Library callers that want explicit
ownership can build their own handle with ``GitLabClient.from_config`` and
pass it to :mod:`gitlab_ops.gitlab.api` directly.
"""

from __future__ import annotations

import logging
import threading

from .config import Config
from .gitlab.client import GitLabClient

logger = logging.getLogger(__name__)

_CLIENT: GitLabClient | None = None
_LOCK = threading.Lock()


def get_client(url: str | None = None) -> GitLabClient:
    """Return the shared client handle, creating it on first call.

    Once created, the handle is returned as-is: ``url`` only matters for the
    first successful call.  Raises ``GitLabConfigError`` if ``GITLAB_TOKEN``
    is not set when the handle is first built.
    """
    global _CLIENT
    if _CLIENT is not None:
        return _CLIENT
    with _LOCK:
        if _CLIENT is None:
            config = Config.load_from_env(url=url)
            _CLIENT = GitLabClient.from_config(config)
            logger.info("Initialized GitLab client for %s", config.gitlab_url)
    return _CLIENT


def reset_client() -> None:
    """Close and forget the shared client handle."""
    global _CLIENT
    with _LOCK:
        if _CLIENT is not None:
            _CLIENT.close()
        _CLIENT = None
