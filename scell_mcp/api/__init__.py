"""API module for the Scell.io MCP configuration generator.

Functions here are the single source of truth for the CLI commands.
"""

__all__ = []
