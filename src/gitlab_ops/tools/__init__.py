"""Tool module exports for gitlab-ops.

Usage:

    from gitlab_ops.tools import gitlab_tools
    gitlab_tools.gitlab_get_project(project="group/repo")

The server imports these modules and registers their functions as MCP tools.
"""

from . import gitlab_tools  # noqa: F401

__all__ = [
    "gitlab_tools",
]
