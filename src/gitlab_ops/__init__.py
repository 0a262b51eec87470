"""Top‑level package for gitlab-ops.

This package wraps a handful of GitLab REST API calls used to automate
branch, commit, merge request and mirror management on hosted projects.
See `README.md` for more information.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
