"""Shared pytest fixtures for github-rest tests.

Fixture Organization:
    - Settings/logging isolation: autouse fixtures that reset cached state
    - Client fixtures: GitHubClient instances with a fake token
    - Response helpers: real httpx.Response objects for AsyncMock returns

References:
    - pytest fixtures docs: https://docs.pytest.org/en/stable/how-to/fixtures.html
"""

import json
import logging
import os
from typing import Any

import httpx
import pytest

from github_rest import GitHubClient
from github_rest.config import reset_settings

# =============================================================================
# Pytest CLI Options
# =============================================================================


def pytest_addoption(parser):
    """Add custom command line options for test selection."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests against the live GitHub API",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --run-integration is given."""
    if config.getoption("--run-integration"):
        return
    skip_integration = pytest.mark.skip(reason="need --run-integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


# =============================================================================
# Isolation Fixtures (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch):
    """Clear the settings singleton and GITHUB_REST_* env vars around each test."""
    for key in list(os.environ):
        if key.startswith("GITHUB_REST_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset github_rest loggers so caplog can capture records.

    configure_logging() attaches handlers and disables propagation on the
    github_rest namespace logger; undo that before and after each test.
    """
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("github_rest"):
            child_logger = logging.getLogger(name)
            child_logger.handlers.clear()
            child_logger.propagate = True

    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("github_rest"):
            child_logger = logging.getLogger(name)
            child_logger.handlers.clear()
            child_logger.propagate = True
            child_logger.setLevel(logging.NOTSET)


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def github_client():
    """GitHubClient with a fake token against the public API root."""
    return GitHubClient(token="ghp_test_token_123")


# =============================================================================
# Response Helpers
# =============================================================================


def make_response(
    status_code: int = 200,
    json_data: Any = None,
    headers: dict[str, str] | None = None,
    content: bytes | None = None,
) -> httpx.Response:
    """Build a real httpx.Response as returned by AsyncClient.send."""
    _headers = {
        "X-RateLimit-Limit": "5000",
        "X-RateLimit-Remaining": "4999",
        "X-RateLimit-Used": "1",
        "X-RateLimit-Reset": "1700000000",
        "X-RateLimit-Resource": "core",
    }
    if headers:
        _headers.update(headers)
    if content is None:
        content = json.dumps(json_data).encode() if json_data is not None else b""
    if content and "Content-Type" not in _headers:
        _headers["Content-Type"] = "application/json; charset=utf-8"
    return httpx.Response(status_code, headers=_headers, content=content)


@pytest.fixture
def response_factory():
    """Expose make_response to tests as a fixture."""
    return make_response
