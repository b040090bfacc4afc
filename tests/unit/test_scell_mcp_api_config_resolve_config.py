"""Unit tests for scell_mcp.api.config.resolve_config module."""

from scell_mcp.api.config.Environment import Environment
from scell_mcp.api.config.resolve_config import resolve_config, resolve_home
from tests.unit.conftest import STAGING_BASE_URL, VALID_API_KEY


def test_explicit_values():
    raw = resolve_config(VALID_API_KEY, STAGING_BASE_URL, "staging", True, environ={})
    assert raw == {"api_key": VALID_API_KEY, "base_url": STAGING_BASE_URL, "environment": "staging", "sandbox": True}


def test_unset_values_are_omitted():
    assert resolve_config(environ={}) == {}


def test_environment_fallbacks():
    environ = {"SCELL_API_KEY": VALID_API_KEY, "SCELL_BASE_URL": STAGING_BASE_URL}
    assert resolve_config(environ=environ) == {"api_key": VALID_API_KEY, "base_url": STAGING_BASE_URL}


def test_explicit_values_win_over_environment():
    environ = {"SCELL_API_KEY": "sk_env_0000000000", "SCELL_BASE_URL": "https://env.example.com"}
    raw = resolve_config("sk_cli_1111111111", "https://cli.example.com", environ=environ)
    assert raw["api_key"] == "sk_cli_1111111111"
    assert raw["base_url"] == "https://cli.example.com"


def test_process_environment_is_not_read(monkeypatch):
    monkeypatch.setenv("SCELL_API_KEY", VALID_API_KEY)
    assert resolve_config() == {}


def test_environment_enum_is_flattened():
    assert resolve_config(VALID_API_KEY, environment=Environment.PRODUCTION)["environment"] == "production"


def test_resolve_home():
    assert resolve_home({"HOME": "/home/ada", "USERPROFILE": "C:/Users/ada"}) == "/home/ada"
    assert resolve_home({"USERPROFILE": "C:/Users/ada"}) == "C:/Users/ada"
    assert resolve_home({}) == "~"
    assert resolve_home() == "~"
