"""Exception types raised by gitlab-ops."""

from __future__ import annotations


class GitLabError(RuntimeError):
    """Base class for every error raised by this package."""


class GitLabConfigError(GitLabError):
    """Required configuration (usually ``GITLAB_TOKEN``) is missing or invalid."""


class GitLabAPIError(GitLabError):
    """A GitLab API call failed.

    ``status_code`` is ``None`` when the request never produced a response
    (connection errors, timeouts).  ``text`` holds the redacted response body.
    """

    def __init__(self, message: str, status_code: int | None = None, text: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.text = text


class GitLabNotFoundError(GitLabAPIError):
    """The requested resource does not exist (HTTP 404)."""
