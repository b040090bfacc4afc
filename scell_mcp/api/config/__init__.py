"""Config API module: generation, validation and path lookup for MCP client configs."""

from .ConfigValidationError import ConfigValidationError
from .Environment import Environment
from .generate_claude_desktop_config import generate_claude_desktop_config
from .generate_client_config import generate_client_config
from .generate_config_with_instructions import generate_config_with_instructions
from .generate_cursor_config import generate_cursor_config
from .generate_generic_config import generate_generic_config
from .generate_server_config import generate_server_config
from .generate_vscode_config import generate_vscode_config
from .get_config_path import get_config_path
from .McpClient import McpClient
from .McpClientConfig import McpClientConfig
from .McpServerConfig import McpServerConfig
from .Platform import Platform
from .render_config import render_config
from .ScellMcpConfig import ScellMcpConfig
from .validate_config import validate_config
from .ValidationResult import ValidationResult

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
