"""Serialize a client configuration document."""

import json

from .McpClientConfig import McpClientConfig


def render_config(document: McpClientConfig) -> str:
    """Serialize ``document`` as JSON with 2-space indentation."""
    return json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
