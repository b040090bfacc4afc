"""Generate configuration for any MCP-compatible client."""

from ._wrap_server_config import _wrap_server_config
from .McpClientConfig import McpClientConfig
from .ScellMcpConfig import ScellMcpConfig


def generate_generic_config(config: ScellMcpConfig) -> McpClientConfig:
    return _wrap_server_config(config)
