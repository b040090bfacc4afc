"""Dispatch configuration generation on the target client."""

from collections.abc import Callable

from .generate_claude_desktop_config import generate_claude_desktop_config
from .generate_cursor_config import generate_cursor_config
from .generate_generic_config import generate_generic_config
from .generate_vscode_config import generate_vscode_config
from .McpClient import McpClient
from .McpClientConfig import McpClientConfig
from .ScellMcpConfig import ScellMcpConfig

_GENERATORS: dict[McpClient, Callable[[ScellMcpConfig], McpClientConfig]] = {
    McpClient.CLAUDE: generate_claude_desktop_config,
    McpClient.CURSOR: generate_cursor_config,
    McpClient.VSCODE: generate_vscode_config,
    McpClient.GENERIC: generate_generic_config,
}


def generate_client_config(client: McpClient | str, config: ScellMcpConfig) -> McpClientConfig:
    """Generate the configuration document for ``client``.

    Raises:
        ValueError: If ``client`` is not a known MCP client
    """
    return _GENERATORS[McpClient(client)](config)
