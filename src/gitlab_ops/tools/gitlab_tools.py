"""GitLab tool implementations.

Thin wrappers that turn flat tool arguments into a ``RepoRequest``, fetch the
shared client handle and delegate to the ``gitlab.api`` module.  Every tool
returns a JSON-serializable dictionary.
"""

from __future__ import annotations

from ..gitlab import api as gitlab_api
from ..models import RepoRequest
from ..state import get_client


def gitlab_create_branch(project: str, branch: str, url: str | None = None) -> dict[str, object]:
    """Create ``branch`` in ``project`` from the configured base branch."""
    client = get_client(url)
    request = RepoRequest(url=client.url, project=project, branch=branch)
    return gitlab_api.create_branch(client, request)


def gitlab_get_branch(project: str, branch: str, url: str | None = None) -> dict[str, object]:
    client = get_client(url)
    request = RepoRequest(url=client.url, project=project, branch=branch)
    return gitlab_api.get_branch(client, request)


def gitlab_delete_branch(project: str, branch: str, url: str | None = None) -> dict[str, object]:
    client = get_client(url)
    request = RepoRequest(url=client.url, project=project, branch=branch)
    resp = gitlab_api.delete_branch(client, request)
    return {"deleted": True, "status_code": resp.status_code}


def gitlab_get_project(project: str, url: str | None = None) -> dict[str, object]:
    client = get_client(url)
    return gitlab_api.get_project(client, RepoRequest(url=client.url, project=project))


def gitlab_get_fork_parent(project: str, url: str | None = None) -> dict[str, object]:
    """Return the fork parent of ``project``.

    ``fork_parent`` is ``None`` when the project is not a fork.
    """
    client = get_client(url)
    parent = gitlab_api.get_fork_parent(client, RepoRequest(url=client.url, project=project))
    return {"fork_parent": parent}


def gitlab_get_file(project: str, path: str, branch: str, url: str | None = None) -> dict[str, object]:
    """Read ``path`` at ``branch``.

    Content is decoded as UTF-8; undecodable bytes are replaced.
    """
    client = get_client(url)
    request = RepoRequest(url=client.url, project=project, branch=branch, path=path)
    raw = gitlab_api.get_file(client, request)
    return {
        "path": path,
        "branch": branch,
        "content": raw.decode("utf-8", errors="replace"),
        "size": len(raw),
    }


def gitlab_create_commit(
    project: str,
    branch: str,
    message: str,
    files: dict[str, str],
    url: str | None = None,
) -> dict[str, object]:
    """Commit ``files`` (path -> content) to ``branch``, creating the branch if needed."""
    client = get_client(url)
    request = RepoRequest(url=client.url, project=project, branch=branch, message=message)
    return gitlab_api.create_commit(client, request, files)


def gitlab_create_merge_request(
    project: str,
    branch: str,
    title: str,
    url: str | None = None,
) -> dict[str, object]:
    """Open a merge request from ``branch`` into the project's fork parent.

    Raises ``ValueError`` if ``project`` is not a fork.
    """
    client = get_client(url)
    request = RepoRequest(url=client.url, project=project, branch=branch, message=title)
    return gitlab_api.create_merge_request(client, request)


def gitlab_create_pull_mirror(project: str, url: str | None = None) -> dict[str, object]:
    """Register the configured upstream mirror on ``project``."""
    client = get_client(url)
    return gitlab_api.create_pull_mirror(client, RepoRequest(url=client.url, project=project))
