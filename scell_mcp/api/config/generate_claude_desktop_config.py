"""Generate configuration for Claude Desktop."""

from ._wrap_server_config import _wrap_server_config
from .McpClientConfig import McpClientConfig
from .ScellMcpConfig import ScellMcpConfig


def generate_claude_desktop_config(config: ScellMcpConfig) -> McpClientConfig:
    """Generate configuration for Claude Desktop.

    Config file location:
    - macOS: ~/Library/Application Support/Claude/claude_desktop_config.json
    - Windows: %APPDATA%/Claude/claude_desktop_config.json
    - Linux: ~/.config/Claude/claude_desktop_config.json

    Args:
        config: Validated Scell MCP configuration

    Returns:
        Claude Desktop configuration document
    """
    return _wrap_server_config(config)
