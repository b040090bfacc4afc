"""Centralized logging configuration for scell-mcp."""

import logging
import sys


def setup_logging(level: int = logging.WARNING, format_string: str | None = None) -> None:
    """Configure logging to STDERR for the CLI process.

    STDOUT is reserved for generated configuration, so nothing is logged there.

    Args:
        level: Logging level (default WARNING)
        format_string: Optional custom format string
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
