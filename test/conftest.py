"""
Pytest configuration and fixtures for Theme Hooks tests
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH120

from themehooks.config import Settings  # noqa: E402
from themehooks.hooks.dispatcher import HookDispatcher  # noqa: E402
from themehooks.hooks.registry import HookRegistry  # noqa: E402
from themehooks.kernel import build_kernel  # noqa: E402


@pytest.fixture
def test_settings() -> Settings:
    """Settings with both demonstration extensions enabled"""
    return Settings(enabled_extensions=["class_hooks", "legacy_hooks"], debug=False)


@pytest.fixture
def registry() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def dispatcher(registry: HookRegistry) -> HookDispatcher:
    return HookDispatcher(registry)


@pytest.fixture
def kernel(test_settings: Settings):
    """A fully built kernel, as the application builds it at startup"""
    return build_kernel(test_settings)


@pytest.fixture
def client(test_settings: Settings):
    """Create a test client for a freshly built application"""
    from main import create_app

    with TestClient(create_app(test_settings), raise_server_exceptions=False) as test_client:
        yield test_client
