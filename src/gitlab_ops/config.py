"""Configuration loading for gitlab-ops.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates a `Config` object.

Required variables:
- GITLAB_TOKEN

Optional variables with defaults:
- GITLAB_URL (default: 'https://gitlab.com')
- GITLAB_BASE_BRANCH (default: 'master')
- GITLAB_MIRROR_URL (default: the clusterimagesets upstream)
- GITLAB_TIMEOUT_S (default: 10)
- LOG_LEVEL (default: 'INFO')
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .constants import (
    DEFAULT_BASE_BRANCH,
    DEFAULT_GITLAB_URL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MIRROR_URL,
    REQUEST_TIMEOUT_S,
)
from .errors import GitLabConfigError


@dataclass
class Config:
    """Configuration values loaded from the environment."""

    gitlab_token: str
    gitlab_url: str = DEFAULT_GITLAB_URL
    base_branch: str = DEFAULT_BASE_BRANCH
    mirror_url: str = DEFAULT_MIRROR_URL
    request_timeout_s: float = REQUEST_TIMEOUT_S
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def load_from_env(cls, url: str | None = None) -> Config:
        """Load configuration from environment variables.

        The `.env` file in the working directory (or a parent) is loaded if
        present.  An explicit ``url`` takes precedence over ``GITLAB_URL``.
        Raises `GitLabConfigError` if ``GITLAB_TOKEN`` is missing.
        """
        load_dotenv(find_dotenv(usecwd=True))

        gitlab_token = os.getenv("GITLAB_TOKEN")
        if not gitlab_token:
            raise GitLabConfigError("Missing required environment variable: GITLAB_TOKEN")

        gitlab_url = url or os.getenv("GITLAB_URL") or DEFAULT_GITLAB_URL

        timeout_str = os.getenv("GITLAB_TIMEOUT_S")
        try:
            request_timeout_s = float(timeout_str) if timeout_str else REQUEST_TIMEOUT_S
        except ValueError as exc:
            raise GitLabConfigError(f"Invalid GITLAB_TIMEOUT_S value: {timeout_str!r}") from exc

        return cls(
            gitlab_token=gitlab_token,
            gitlab_url=gitlab_url.rstrip("/"),
            base_branch=os.getenv("GITLAB_BASE_BRANCH") or DEFAULT_BASE_BRANCH,
            mirror_url=os.getenv("GITLAB_MIRROR_URL") or DEFAULT_MIRROR_URL,
            request_timeout_s=request_timeout_s,
            log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )
