"""Generate configuration for Cursor."""

from ._wrap_server_config import _wrap_server_config
from .McpClientConfig import McpClientConfig
from .ScellMcpConfig import ScellMcpConfig


def generate_cursor_config(config: ScellMcpConfig) -> McpClientConfig:
    """Generate configuration for Cursor (``.cursor/mcp.json`` in the project root)."""
    return _wrap_server_config(config)
