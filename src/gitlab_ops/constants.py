"""Global defaults for gitlab-ops.

These values are used when the corresponding environment variables are not
set.  Override them through the environment rather than editing this file.
"""

import os

# GitLab instance
DEFAULT_GITLAB_URL = "https://gitlab.com"
API_PATH = "/api/v4"

# Branch that new branches and merge requests are created against
DEFAULT_BASE_BRANCH = "master"

# Single upstream source configured by the pull mirror operation
DEFAULT_MIRROR_URL = "https://gitlab.cee.redhat.com/service/clusterimagesets.git"

# Limits
REQUEST_TIMEOUT_S = 10.0

# Transport
MCP_TRANSPORT = os.environ.get("MCP_TRANSPORT", "stdio")

# Logging
DEFAULT_LOG_LEVEL = "INFO"
