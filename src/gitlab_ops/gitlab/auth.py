"""Authentication helpers for the GitLab API."""

from __future__ import annotations

import httpx

from .. import __version__
from ..config import Config
from ..constants import API_PATH


def get_gitlab_client(config: Config) -> httpx.Client:
    """Return a configured GitLab httpx client with the PRIVATE-TOKEN header set."""
    return httpx.Client(
        base_url=f"{config.gitlab_url}{API_PATH}",
        headers={
            "PRIVATE-TOKEN": config.gitlab_token,
            "Accept": "application/json",
            "User-Agent": f"gitlab-ops/{__version__}",
        },
        timeout=config.request_timeout_s,
    )
