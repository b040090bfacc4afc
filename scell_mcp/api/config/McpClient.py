"""MCP clients a configuration can be generated for."""

from enum import Enum


class McpClient(str, Enum):
    CLAUDE = "claude"
    CURSOR = "cursor"
    VSCODE = "vscode"
    GENERIC = "generic"

    @property
    def display_name(self) -> str:
        """Capitalized client name used in the generic header."""
        return self.value.capitalize()
