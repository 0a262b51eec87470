"""MCP stdio server entrypoint for gitlab-ops.

The server runs over standard input/output using the Model Context Protocol
and registers one tool per GitLab repository operation.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

from mcp.server.fastmcp import FastMCP

from .config import Config
from .constants import MCP_TRANSPORT
from .tools import gitlab_tools


def build_tools_dispatch() -> dict[str, Callable[..., dict[str, Any]]]:
    """Return a mapping from tool names to callables."""
    return {
        # Branches
        "gitlab_create_branch": gitlab_tools.gitlab_create_branch,
        "gitlab_get_branch": gitlab_tools.gitlab_get_branch,
        "gitlab_delete_branch": gitlab_tools.gitlab_delete_branch,
        # Projects and files
        "gitlab_get_project": gitlab_tools.gitlab_get_project,
        "gitlab_get_fork_parent": gitlab_tools.gitlab_get_fork_parent,
        "gitlab_get_file": gitlab_tools.gitlab_get_file,
        # Changes
        "gitlab_create_commit": gitlab_tools.gitlab_create_commit,
        "gitlab_create_merge_request": gitlab_tools.gitlab_create_merge_request,
        "gitlab_create_pull_mirror": gitlab_tools.gitlab_create_pull_mirror,
    }


def main() -> None:
    """Entrypoint for the gitlab-ops MCP server.

    Configuration is loaded up front so a missing ``GITLAB_TOKEN`` stops the
    server before it starts serving.
    """
    config = Config.load_from_env()

    # stdout carries the MCP protocol
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)
    logger.info("Starting gitlab-ops MCP server")

    mcp = FastMCP("gitlab-ops-mcp")

    dispatch = build_tools_dispatch()
    for name, func in dispatch.items():
        mcp.add_tool(func, name=name)

    logger.info("Registered %d tools", len(dispatch))

    mcp.run(transport=MCP_TRANSPORT)


if __name__ == "__main__":
    main()
