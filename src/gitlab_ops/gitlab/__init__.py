"""GitLab API integration."""

from .api import (
    create_branch,
    create_commit,
    create_merge_request,
    create_pull_mirror,
    delete_branch,
    get_branch,
    get_file,
    get_fork_parent,
    get_project,
)
from .auth import get_gitlab_client
from .client import GitLabClient

__all__ = [
    "GitLabClient",
    "get_gitlab_client",
    "create_branch",
    "get_branch",
    "delete_branch",
    "get_project",
    "get_fork_parent",
    "get_file",
    "create_commit",
    "create_merge_request",
    "create_pull_mirror",
]
