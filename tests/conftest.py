"""Shared pytest configuration and fixtures for all tests."""

import pytest

from scell_mcp.api.config.ScellMcpConfig import ScellMcpConfig


def pytest_configure(config):
    for marker in ("unit", "cli", "config"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "test_cli" in path_str:
            item.add_marker(pytest.mark.cli)


# =============================================================================
# Configuration Helpers
# =============================================================================

VALID_API_KEY = "sk_live_abcdef1234"
STAGING_BASE_URL = "https://api.staging.scell.io/api"


def minimal_config_dict() -> dict:
    """Minimal valid configuration mapping (API key only)."""
    return {"api_key": VALID_API_KEY}


def staging_config_dict() -> dict:
    """Configuration mapping targeting the staging API."""
    return {"api_key": VALID_API_KEY, "base_url": STAGING_BASE_URL, "environment": "staging"}


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict().copy()


@pytest.fixture
def minimal_config() -> ScellMcpConfig:
    return ScellMcpConfig(**minimal_config_dict())


@pytest.fixture
def staging_config() -> ScellMcpConfig:
    return ScellMcpConfig(**staging_config_dict())


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove Scell variables from the process environment and point HOME at tmp_path."""
    monkeypatch.delenv("SCELL_API_KEY", raising=False)
    monkeypatch.delenv("SCELL_BASE_URL", raising=False)
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
