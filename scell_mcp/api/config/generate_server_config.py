"""Build the launch descriptor for the Scell.io MCP proxy."""

from ...constants import (
    API_KEY_ENV,
    API_KEY_HEADER,
    BASE_URL_ENV,
    DEFAULT_BASE_URL,
    ENVIRONMENT_ENV,
    LAUNCHER_COMMAND,
    LAUNCHER_PACKAGE,
    SANDBOX_SUFFIX,
)
from .McpServerConfig import McpServerConfig
from .ScellMcpConfig import ScellMcpConfig


def resolve_base_url(config: ScellMcpConfig) -> str:
    """Return the base URL the proxy should target.

    Falls back to the production API when no base URL is set, and appends the
    sandbox suffix (once) when sandbox mode is on.
    """
    base_url = config.base_url or DEFAULT_BASE_URL
    if config.sandbox:
        base_url = base_url.rstrip("/")
        if not base_url.endswith(SANDBOX_SUFFIX):
            base_url += SANDBOX_SUFFIX
    return base_url


def generate_server_config(config: ScellMcpConfig) -> McpServerConfig:
    """Generate the MCP server launch descriptor for a validated config.

    The API key is written under both the header-style and the variable-style
    name; clients read one or the other.
    """
    base_url = resolve_base_url(config)
    env = {
        API_KEY_HEADER: config.api_key,
        API_KEY_ENV: config.api_key,
        BASE_URL_ENV: base_url,
    }
    if config.environment is not None:
        env[ENVIRONMENT_ENV] = config.environment.value

    return McpServerConfig(
        command=LAUNCHER_COMMAND,
        args=["-y", LAUNCHER_PACKAGE, base_url],
        env=env,
    )
