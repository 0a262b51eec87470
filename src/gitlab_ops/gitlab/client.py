"""The client handle threaded through every repository operation."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from ..config import Config
from .auth import get_gitlab_client


@dataclass
class GitLabClient:
    """An authenticated connection to one GitLab instance.

    Holds the configuration it was built from together with the underlying
    ``httpx.Client``.  Build it once with :meth:`from_config` and pass it to
    the functions in :mod:`gitlab_ops.gitlab.api`.
    """

    config: Config
    http: httpx.Client

    @classmethod
    def from_config(cls, config: Config) -> GitLabClient:
        return cls(config=config, http=get_gitlab_client(config))

    @property
    def url(self) -> str:
        return self.config.gitlab_url

    @property
    def base_branch(self) -> str:
        return self.config.base_branch

    @property
    def mirror_url(self) -> str:
        return self.config.mirror_url

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> GitLabClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
