"""Write generated configuration text to disk."""

import logging
from pathlib import Path

from ...utils.expand_path import expand_path

logger = logging.getLogger(__name__)


def write_config(path: str | Path, content: str) -> Path:
    """Write ``content`` to ``path``, creating parent directories as needed.

    Returns:
        The expanded path that was written

    Raises:
        OSError: If the directory or file cannot be written
    """
    target = expand_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    logger.info("Wrote MCP configuration to %s", target)
    return target
