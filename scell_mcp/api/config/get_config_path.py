"""Conventional MCP configuration file locations per client and platform."""

from ...constants import GENERIC_CONFIG_PATH
from .McpClient import McpClient
from .Platform import Platform

_CLAUDE_CONFIG_FILE = "Claude/claude_desktop_config.json"


def get_config_path(
    client: McpClient | str,
    platform: Platform | str | None = None,
    home: str = "~",
    appdata: str | None = None,
) -> str:
    """Return the path a client reads its MCP configuration from.

    Purely advisory: nothing is checked or created on disk.

    Args:
        client: Target MCP client
        platform: Operating system (defaults to the running one)
        home: User home directory used in absolute paths
        appdata: Windows roaming application data directory, if known

    Returns:
        Configuration file path for the client

    Raises:
        ValueError: If ``client`` or ``platform`` is not recognized
    """
    client = McpClient(client)
    platform = Platform(platform) if platform is not None else Platform.current()

    if client is McpClient.CLAUDE:
        if platform is Platform.DARWIN:
            return f"{home}/Library/Application Support/{_CLAUDE_CONFIG_FILE}"
        if platform is Platform.WIN32:
            return f"{appdata or f'{home}/AppData/Roaming'}/{_CLAUDE_CONFIG_FILE}"
        return f"{home}/.config/{_CLAUDE_CONFIG_FILE}"
    if client is McpClient.CURSOR:
        return ".cursor/mcp.json"
    if client is McpClient.VSCODE:
        return ".vscode/mcp.json"
    return GENERIC_CONFIG_PATH
