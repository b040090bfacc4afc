"""Unit tests for scell_mcp.api.config.cmd_generate module."""

import json

import pytest

from scell_mcp.api.config.cmd_generate import cmd_generate
from tests.unit.conftest import STAGING_BASE_URL, VALID_API_KEY, run_cmd

pytestmark = pytest.mark.config

HOME_ENV = {"HOME": "/home/ada"}


def test_announce_names_client():
    result = cmd_generate("cursor", api_key=VALID_API_KEY, environ={})
    assert "cursor" in result.announce


def test_cursor_document():
    result = run_cmd(cmd_generate, "cursor", api_key=VALID_API_KEY, environ=HOME_ENV, platform="linux")
    assert result.success is True
    assert result.output["errors"] == []
    assert result.output["client"] == "cursor"
    assert result.output["config_path"] == ".cursor/mcp.json"
    assert result.output["written_to"] == ""
    assert result.result == "Save this configuration to: .cursor/mcp.json"
    data = json.loads(result.output["content"])
    assert data["mcpServers"]["scell"]["env"]["SCELL_BASE_URL"] == "https://api.scell.io/api"


def test_claude_path_uses_environ_home():
    result = run_cmd(cmd_generate, "claude", api_key=VALID_API_KEY, environ=HOME_ENV, platform="darwin")
    assert result.output["config_path"] == "/home/ada/Library/Application Support/Claude/claude_desktop_config.json"


def test_claude_win32_uses_appdata():
    environ = {"USERPROFILE": "C:/Users/ada", "APPDATA": "D:/Roaming"}
    result = run_cmd(cmd_generate, "claude", api_key=VALID_API_KEY, environ=environ, platform="win32")
    assert result.output["config_path"] == "D:/Roaming/Claude/claude_desktop_config.json"


def test_generic_content_has_header():
    result = run_cmd(cmd_generate, "generic", api_key=VALID_API_KEY, environ={})
    assert result.success is True
    assert result.output["config_path"] == "mcp.json"
    assert result.output["content"].startswith("// Scell.io MCP Configuration for Generic\n")


def test_api_key_and_base_url_from_environ():
    environ = {"SCELL_API_KEY": VALID_API_KEY, "SCELL_BASE_URL": STAGING_BASE_URL}
    result = run_cmd(cmd_generate, "vscode", environment="staging", environ=environ)
    assert result.success is True
    env = json.loads(result.output["content"])["mcpServers"]["scell"]["env"]
    assert env["SCELL_API_KEY"] == VALID_API_KEY
    assert env["SCELL_BASE_URL"] == STAGING_BASE_URL
    assert env["SCELL_ENVIRONMENT"] == "staging"


def test_validation_failure_lists_all_errors():
    result = run_cmd(cmd_generate, "cursor", api_key="short", base_url="api.scell.io", environ={})
    assert result.success is False
    assert result.result == "Configuration validation failed:"
    assert result.output["content"] == ""
    assert result.output["errors"] == [
        "API key appears to be too short",
        "Base URL must start with http:// or https://",
    ]


def test_missing_api_key():
    result = run_cmd(cmd_generate, "claude", environ={})
    assert result.success is False
    assert result.output["errors"] == ["API key is required"]


def test_unknown_client():
    result = run_cmd(cmd_generate, "windsurf", api_key=VALID_API_KEY, environ={})
    assert result.success is False
    assert result.output["client"] == "windsurf"
    assert len(result.output["errors"]) == 1


def test_writes_output_file(tmp_path):
    target = tmp_path / "cfg" / "mcp.json"
    result = run_cmd(cmd_generate, "cursor", api_key=VALID_API_KEY, output=str(target), environ={})
    assert result.success is True
    assert result.output["written_to"] == str(target)
    assert result.result == f"Configuration written to: {target}"
    assert target.read_text(encoding="utf-8") == result.output["content"] + "\n"


def test_write_failure_is_reported(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    result = run_cmd(cmd_generate, "cursor", api_key=VALID_API_KEY, output=str(blocker / "mcp.json"), environ={})
    assert result.success is False
    assert result.result.startswith("Error writing file:")
    assert result.output["errors"][0].startswith("Error writing file:")


def test_api_key_is_not_logged(caplog):
    caplog.set_level("DEBUG", logger="scell_mcp")
    run_cmd(cmd_generate, "cursor", api_key=VALID_API_KEY, environ={})
    assert VALID_API_KEY not in caplog.text


def test_unresolvable_home_is_reported():
    result = run_cmd(cmd_generate, "cursor", api_key=VALID_API_KEY, output="~nosuchuser_xyz/mcp.json", environ={})
    assert result.success is False
    assert result.output["errors"][0].startswith("Error writing file:")
