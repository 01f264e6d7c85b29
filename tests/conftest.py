"""Pytest configuration for external_api tests.

Key Principles:
- Mock protocols when testing in isolation
- Each test gets fresh process-wide state (settings, mount state)
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Project root (for the external_api package)
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from external_api.app import AppMountState, HostSurface, reset_mount_state
from external_api.config import reset_settings


@pytest.fixture
def mock_logger():
    """Mock logger following the LoggerProtocol injection pattern."""
    logger = MagicMock()
    logger.info = MagicMock()
    logger.debug = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.bind = MagicMock(return_value=logger)
    return logger


@pytest.fixture
def host_dispatch():
    """Test double for the host send primitive."""
    return MagicMock()


@pytest.fixture
def mount_state():
    return AppMountState()


@pytest.fixture
def mounted_state(mount_state):
    """Mount state with a single surface scoped to 'room1'."""
    mount_state.mount(HostSurface(scope="room1", name="main"))
    return mount_state


@pytest.fixture(autouse=True)
def _reset_process_state(monkeypatch):
    for key in ("EXTERNAL_API_LOG_LEVEL", "EXTERNAL_API_JSON_LOGS", "EXTERNAL_API_LOG_EVENTS"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    reset_mount_state()
    yield
    reset_settings()
    reset_mount_state()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (may use mocks)"
    )
    config.addinivalue_line(
        "markers", "integration: Pipeline-to-host tests without mocks of the bridge"
    )
