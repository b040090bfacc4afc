"""Generate configuration for VS Code."""

from ._wrap_server_config import _wrap_server_config
from .McpClientConfig import McpClientConfig
from .ScellMcpConfig import ScellMcpConfig


def generate_vscode_config(config: ScellMcpConfig) -> McpClientConfig:
    """Generate configuration for VS Code with Copilot.

    Saved as ``.vscode/mcp.json`` in the project root.
    """
    return _wrap_server_config(config)
