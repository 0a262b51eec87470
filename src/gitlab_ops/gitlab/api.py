"""GitLab REST API wrapper.

Each operation takes an explicit :class:`GitLabClient` handle and a
:class:`RepoRequest` describing the target, issues one (or, for commits and
merge requests, a short sequence of) API calls and returns GitLab's decoded
JSON unchanged.  Failures surface as :class:`GitLabAPIError`.
"""

from __future__ import annotations

import base64
import binascii
import logging
from urllib.parse import quote

import httpx

from ..errors import GitLabAPIError, GitLabNotFoundError
from ..models import RepoRequest
from ..policy.redaction import redact_secrets
from .client import GitLabClient

logger = logging.getLogger(__name__)


def _encode(value: str) -> str:
    """URL-encode a project path, branch or file path as one path segment."""
    return quote(str(value), safe="")


def _project_path(request: RepoRequest) -> str:
    return f"/projects/{_encode(request.project)}"


def _send(
    client: GitLabClient,
    method: str,
    path: str,
    *,
    params: dict[str, object] | None = None,
    json: dict[str, object] | None = None,
) -> httpx.Response:
    """Perform an HTTP request against the GitLab API and return the response.

    Non-2xx responses raise :class:`GitLabAPIError` (or
    :class:`GitLabNotFoundError` for 404).  Transport errors are wrapped the
    same way, with ``status_code`` left as ``None``.
    """
    secrets = [client.config.gitlab_token]
    try:
        resp = client.http.request(method, path, params=params, json=json)
    except httpx.HTTPError as exc:
        reason = redact_secrets(str(exc), secrets)
        logger.error("GitLab API request %s %s failed: %s", method, path, reason)
        raise GitLabAPIError(f"GitLab API request failed: {reason}") from exc

    if 200 <= resp.status_code < 300:
        return resp

    text = redact_secrets(resp.text, secrets)
    if resp.status_code == 404:
        raise GitLabNotFoundError(f"GitLab API error 404: {text}", status_code=404, text=text)

    logger.error("GitLab API error %s on %s %s: %s", resp.status_code, method, path, text)
    raise GitLabAPIError(
        f"GitLab API error {resp.status_code}: {text}", status_code=resp.status_code, text=text
    )


def _gitlab_request(
    client: GitLabClient,
    method: str,
    path: str,
    *,
    params: dict[str, object] | None = None,
    json: dict[str, object] | None = None,
) -> object:
    """Like :func:`_send` but return the decoded JSON body."""
    resp = _send(client, method, path, params=params, json=json)
    try:
        return resp.json()
    except ValueError:
        return resp.text


def create_branch(client: GitLabClient, request: RepoRequest) -> dict[str, object]:
    """Create ``request.branch`` from the configured base branch."""
    branch = _gitlab_request(
        client,
        "POST",
        f"{_project_path(request)}/repository/branches",
        params={"branch": request.branch, "ref": client.base_branch},
    )
    logger.info("Created branch %s in %s from %s", request.branch, request.project, client.base_branch)
    return branch


def get_branch(client: GitLabClient, request: RepoRequest) -> dict[str, object]:
    """Fetch branch metadata.  Raises ``GitLabNotFoundError`` if it does not exist."""
    return _gitlab_request(
        client,
        "GET",
        f"{_project_path(request)}/repository/branches/{_encode(request.branch)}",
    )


def delete_branch(client: GitLabClient, request: RepoRequest) -> httpx.Response:
    """Delete ``request.branch`` and return the raw response."""
    return _send(
        client,
        "DELETE",
        f"{_project_path(request)}/repository/branches/{_encode(request.branch)}",
    )


def get_project(client: GitLabClient, request: RepoRequest) -> dict[str, object]:
    return _gitlab_request(client, "GET", _project_path(request))


def get_fork_parent(client: GitLabClient, request: RepoRequest) -> dict[str, object] | None:
    """Return the project this one was forked from, or ``None`` if it is not a fork."""
    project = get_project(client, request)
    return project.get("forked_from_project")


def get_file(client: GitLabClient, request: RepoRequest) -> bytes:
    """Return the raw bytes of ``request.path`` at ``request.branch``.

    GitLab transports file content base64-encoded; it is decoded here.
    Malformed content raises ``GitLabAPIError`` rather than returning
    partially decoded bytes.
    """
    data = _gitlab_request(
        client,
        "GET",
        f"{_project_path(request)}/repository/files/{_encode(request.path)}",
        params={"ref": request.branch},
    )
    if not isinstance(data, dict):
        raise GitLabAPIError(f"Unexpected response for file '{request.path}': not a JSON object")
    try:
        return base64.b64decode(data.get("content") or "", validate=True)
    except binascii.Error as exc:
        raise GitLabAPIError(f"Invalid base64 content for file '{request.path}': {exc}") from exc


def create_commit(
    client: GitLabClient,
    request: RepoRequest,
    files: dict[str, str],
) -> dict[str, object]:
    """Commit ``files`` (path -> content) to ``request.branch`` in one commit.

    The branch is created from the base branch first if GitLab reports it as
    missing.  Any other lookup failure is raised without attempting creation.
    Actions follow the iteration order of ``files``.
    """
    try:
        get_branch(client, request)
    except GitLabNotFoundError:
        logger.info("Branch %s not found in %s, creating it", request.branch, request.project)
        create_branch(client, request)

    actions = [
        {
            "action": "update",
            "file_path": path,
            "content": content,
            "encoding": "text",
        }
        for path, content in files.items()
    ]
    payload = {
        "branch": request.branch,
        "commit_message": request.message,
        "actions": actions,
    }
    commit = _gitlab_request(
        client, "POST", f"{_project_path(request)}/repository/commits", json=payload
    )
    logger.info("Committed %d file(s) to %s in %s", len(actions), request.branch, request.project)
    return commit


def create_merge_request(client: GitLabClient, request: RepoRequest) -> dict[str, object]:
    """Open a merge request from ``request.branch`` into the fork parent's base branch.

    Raises ``ValueError`` without contacting GitLab again if the project is
    not a fork.
    """
    fork_parent = get_fork_parent(client, request)
    if not fork_parent or fork_parent.get("id") is None:
        raise ValueError(f"Project '{request.project}' has no fork parent to target")

    payload = {
        "title": request.message,
        "source_branch": request.branch,
        "target_branch": client.base_branch,
        "target_project_id": fork_parent["id"],
    }
    merge_request = _gitlab_request(
        client, "POST", f"{_project_path(request)}/merge_requests", json=payload
    )
    logger.info(
        "Opened merge request from %s:%s into project %s",
        request.project,
        request.branch,
        fork_parent["id"],
    )
    return merge_request


def create_pull_mirror(client: GitLabClient, request: RepoRequest) -> dict[str, object]:
    """Register the configured mirror URL on ``request.project``, enabled.

    The mirror source is ``client.mirror_url``; nothing in ``request`` other
    than the project affects it.
    """
    payload = {"url": client.mirror_url, "enabled": True}
    mirror = _gitlab_request(
        client, "POST", f"{_project_path(request)}/remote_mirrors", json=payload
    )
    logger.info("Added mirror %s to %s", client.mirror_url, request.project)
    return mirror
