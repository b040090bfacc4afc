"""Client configuration document (``{"mcpServers": {...}}``)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .McpServerConfig import McpServerConfig


class McpClientConfig(BaseModel):
    """MCP servers section shared by Claude Desktop, Cursor and VS Code."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    mcp_servers: dict[str, McpServerConfig] = Field(..., alias="mcpServers", description="Servers by name")

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready document with client-facing key names."""
        return self.model_dump(mode="json", by_alias=True)
