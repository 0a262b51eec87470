"""Request descriptor passed to every repository operation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RepoRequest:
    """Parameters for a single GitLab operation.

    ``project`` is either a numeric project ID or a ``namespace/name`` path.
    Fields an operation does not use may be left empty; GitLab rejects
    values that are invalid for the call being made.
    """

    url: str = ""
    project: str = ""
    branch: str = ""
    path: str = ""
    message: str = ""
