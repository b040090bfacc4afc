"""MCP client configuration generator for the Scell.io API.

Supports Claude Desktop, Cursor, VS Code and other MCP-compatible clients.
"""

from .api.config import (
    ConfigValidationError,
    Environment,
    McpClient,
    McpClientConfig,
    McpServerConfig,
    Platform,
    ScellMcpConfig,
    ValidationResult,
    generate_claude_desktop_config,
    generate_client_config,
    generate_config_with_instructions,
    generate_cursor_config,
    generate_generic_config,
    generate_server_config,
    generate_vscode_config,
    get_config_path,
    render_config,
    validate_config,
)

__all__ = [
    "ConfigValidationError",
    "Environment",
    "McpClient",
    "McpClientConfig",
    "McpServerConfig",
    "Platform",
    "ScellMcpConfig",
    "ValidationResult",
    "generate_claude_desktop_config",
    "generate_client_config",
    "generate_config_with_instructions",
    "generate_cursor_config",
    "generate_generic_config",
    "generate_server_config",
    "generate_vscode_config",
    "get_config_path",
    "render_config",
    "validate_config",
]
