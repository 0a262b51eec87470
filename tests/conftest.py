"""Pytest configuration and fixtures for gitlab-ops tests.

IMPORTANT: Environment variables are set BEFORE importing gitlab_ops modules,
since constants read the environment at import time.
"""

from __future__ import annotations

import os

os.environ.setdefault("GITLAB_TOKEN", "test-gitlab-token")
os.environ.setdefault("LOG_LEVEL", "INFO")

import dotenv
import pytest

from gitlab_ops import state
from gitlab_ops.config import Config
from gitlab_ops.gitlab.client import GitLabClient


@pytest.fixture
def make_response(mocker):
    """Return a factory for fake ``httpx.Response`` objects."""

    def _make(status_code: int = 200, payload: object = None, text: str = ""):
        resp = mocker.MagicMock()
        resp.status_code = status_code
        resp.json.return_value = payload
        resp.text = text
        return resp

    return _make


@pytest.fixture
def config() -> Config:
    return Config(gitlab_token="test-gitlab-token", gitlab_url="https://gitlab.example.com")


@pytest.fixture
def client(mocker, config) -> GitLabClient:
    """A GitLabClient whose httpx client is a MagicMock.

    Tests set ``client.http.request.side_effect`` or ``return_value`` to
    script GitLab's responses.
    """
    return GitLabClient(config=config, http=mocker.MagicMock())


@pytest.fixture
def dotenv_dir(mocker, monkeypatch, tmp_path):
    """Run from an empty temp directory with the real ``.env`` loader restored.

    Tests write ``.env`` into the returned directory.  Variables the loader
    may set must be deleted through ``monkeypatch`` first so they are
    restored afterwards.
    """
    mocker.patch("gitlab_ops.config.load_dotenv", new=dotenv.load_dotenv)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch, mocker):
    """Start every test with a known environment and no shared client."""
    monkeypatch.setenv("GITLAB_TOKEN", "test-gitlab-token")
    for name in ("GITLAB_URL", "GITLAB_BASE_BRANCH", "GITLAB_MIRROR_URL", "GITLAB_TIMEOUT_S"):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's local .env out of the tests
    mocker.patch("gitlab_ops.config.load_dotenv", return_value=False)
    state.reset_client()
    yield
    state.reset_client()
