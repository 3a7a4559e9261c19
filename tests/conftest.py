"""Shared fixtures for Context7 MCP tests."""

import pytest
from fastapi.testclient import TestClient

from context7_mcp.api.main import create_app
from context7_mcp.mcp_server.backend import PlaceholderBackend
from context7_mcp.mcp_server.tools import build_registry
from context7_mcp.models.config.server import ServerSettings


@pytest.fixture
def settings():
    """Settings independent of the caller's environment."""
    return ServerSettings(port=3000, host="127.0.0.1", _env_file=None)


@pytest.fixture
def registry():
    return build_registry(PlaceholderBackend())


@pytest.fixture
def client(registry, settings):
    """HTTP client against a freshly connected app."""
    app = create_app(registry, settings)
    with TestClient(app) as test_client:
        yield test_client
