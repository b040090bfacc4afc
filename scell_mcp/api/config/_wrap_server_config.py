"""Wrap the launch descriptor in a client configuration document."""

from ...constants import SERVER_NAME
from .generate_server_config import generate_server_config
from .McpClientConfig import McpClientConfig
from .ScellMcpConfig import ScellMcpConfig


def _wrap_server_config(config: ScellMcpConfig) -> McpClientConfig:
    return McpClientConfig(mcp_servers={SERVER_NAME: generate_server_config(config)})
