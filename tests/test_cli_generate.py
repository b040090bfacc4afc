"""CLI tests for the generate commands (claude, cursor, vscode, generic)."""

import json
import logging

import pytest
from typer.testing import CliRunner

from scell_mcp.cli._create_app import _create_app
from tests.conftest import STAGING_BASE_URL, VALID_API_KEY

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logging(clean_env):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.mark.parametrize("client", ["claude", "cursor", "vscode"])
def test_named_client_prints_bare_json(client):
    result = runner.invoke(_create_app(), [client, VALID_API_KEY])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["mcpServers"]["scell"]["env"]["SCELL_API_KEY"] == VALID_API_KEY
    assert "SCELL_ENVIRONMENT" not in data["mcpServers"]["scell"]["env"]
    assert "Save this configuration to:" in result.stderr


def test_named_clients_print_identical_documents():
    outputs = {runner.invoke(_create_app(), [c, VALID_API_KEY]).stdout for c in ("claude", "cursor", "vscode")}
    assert len(outputs) == 1


def test_cursor_save_hint():
    result = runner.invoke(_create_app(), ["cursor", VALID_API_KEY])
    assert ".cursor/mcp.json" in result.stderr


def test_options():
    result = runner.invoke(
        _create_app(),
        ["vscode", VALID_API_KEY, "--base-url", STAGING_BASE_URL, "--env", "staging", "--sandbox"],
    )
    assert result.exit_code == 0
    server = json.loads(result.stdout)["mcpServers"]["scell"]
    assert server["args"][-1] == f"{STAGING_BASE_URL}/sandbox"
    assert server["env"]["SCELL_ENVIRONMENT"] == "staging"


def test_api_key_from_environment():
    result = runner.invoke(_create_app(), ["cursor"], env={"SCELL_API_KEY": VALID_API_KEY})
    assert result.exit_code == 0
    assert json.loads(result.stdout)["mcpServers"]["scell"]["env"]["X-Scell-API-Key"] == VALID_API_KEY


def test_base_url_from_environment():
    env = {"SCELL_API_KEY": VALID_API_KEY, "SCELL_BASE_URL": STAGING_BASE_URL}
    result = runner.invoke(_create_app(), ["cursor"], env=env)
    assert json.loads(result.stdout)["mcpServers"]["scell"]["env"]["SCELL_BASE_URL"] == STAGING_BASE_URL


def test_generic_prints_annotated_text():
    result = runner.invoke(_create_app(), ["generic", VALID_API_KEY])
    assert result.exit_code == 0
    assert result.stdout.startswith("// Scell.io MCP Configuration for Generic\n")
    assert "// - scell_send_reminder: Send signing reminder" in result.stdout
    body = result.stdout.split("\n\n", 1)[1]
    assert json.loads(body)["mcpServers"]["scell"]["command"] == "npx"


def test_validation_failure():
    result = runner.invoke(_create_app(), ["claude", "short", "--base-url", "api.scell.io"])
    assert result.exit_code == 1
    assert result.stdout == ""
    assert "Configuration validation failed:" in result.stderr
    assert "  - API key appears to be too short" in result.stderr
    assert "  - Base URL must start with http:// or https://" in result.stderr


def test_missing_api_key():
    result = runner.invoke(_create_app(), ["claude"])
    assert result.exit_code == 1
    assert "  - API key is required" in result.stderr


def test_invalid_environment_is_usage_error():
    result = runner.invoke(_create_app(), ["cursor", VALID_API_KEY, "--env", "qa"])
    assert result.exit_code == 2
    assert result.stdout == ""


def test_unknown_option_is_usage_error():
    result = runner.invoke(_create_app(), ["cursor", VALID_API_KEY, "--colour"])
    assert result.exit_code == 2


def test_unknown_command_is_usage_error():
    result = runner.invoke(_create_app(), ["windsurf", VALID_API_KEY])
    assert result.exit_code == 2


def test_output_file(tmp_path):
    target = tmp_path / "Claude" / "claude_desktop_config.json"
    result = runner.invoke(_create_app(), ["claude", VALID_API_KEY, "--output", str(target)])
    assert result.exit_code == 0
    assert result.stdout == ""
    assert "Configuration written to:" in result.stderr
    assert json.loads(target.read_text(encoding="utf-8"))["mcpServers"]["scell"]["command"] == "npx"
