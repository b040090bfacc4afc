"""Launch descriptor for the Scell.io MCP proxy process."""

from pydantic import BaseModel, ConfigDict, Field


class McpServerConfig(BaseModel):
    """How an MCP client starts the proxy process."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    command: str = Field(..., description="Executable that launches the proxy")
    args: list[str] = Field(default_factory=list, description="Arguments passed to the command")
    env: dict[str, str] = Field(default_factory=dict, description="Environment variables for the process")
