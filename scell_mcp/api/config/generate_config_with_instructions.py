"""Annotated configuration text for clients without a config file convention."""

from ...constants import AVAILABLE_TOOLS, DOCS_URL
from ...utils.render_template import render_template
from .generate_generic_config import generate_generic_config
from .get_config_path import get_config_path
from .McpClient import McpClient
from .Platform import Platform
from .render_config import render_config
from .ScellMcpConfig import ScellMcpConfig

INSTRUCTIONS_TEMPLATE = """// Scell.io MCP Configuration for {{ client_name }}
//
// Save this configuration to: {{ config_path }}
//
// Available tools:
{% for name, description in tools %}
// - {{ name }}: {{ description }}
{% endfor %}
//
// Documentation: {{ docs_url }}
"""


def generate_config_with_instructions(
    config: ScellMcpConfig,
    client: McpClient | str = McpClient.GENERIC,
    platform: Platform | str | None = None,
    home: str = "~",
    appdata: str | None = None,
) -> str:
    """Render the configuration document preceded by a ``//`` comment header.

    The header names the client, where to save the file and every remote
    tool the Scell.io server exposes.

    Args:
        config: Validated Scell MCP configuration
        client: Target client named in the header
        platform: Operating system used to resolve the save path
        home: User home directory used in the save path
        appdata: Windows roaming application data directory, if known

    Returns:
        Header, blank line, then the document as 2-space indented JSON
    """
    client = McpClient(client)
    header = render_template(
        INSTRUCTIONS_TEMPLATE,
        {
            "client_name": client.display_name,
            "config_path": get_config_path(client, platform, home=home, appdata=appdata),
            "tools": AVAILABLE_TOOLS,
            "docs_url": DOCS_URL,
        },
    )
    return header.rstrip("\n") + "\n\n" + render_config(generate_generic_config(config))
