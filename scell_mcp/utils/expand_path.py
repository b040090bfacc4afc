"""Expand user path (~/...) to an absolute path."""

from pathlib import Path


def expand_path(path: str | Path) -> Path:
    """Expand ``~`` and make ``path`` absolute without resolving symlinks."""
    return Path(path).expanduser().absolute()
