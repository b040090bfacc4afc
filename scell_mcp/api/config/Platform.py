"""Operating systems with distinct MCP config locations."""

import sys
from enum import Enum


class Platform(str, Enum):
    DARWIN = "darwin"
    WIN32 = "win32"
    LINUX = "linux"

    @classmethod
    def current(cls) -> "Platform":
        """Map ``sys.platform`` onto a known platform (linux when unrecognized)."""
        if sys.platform == "darwin":
            return cls.DARWIN
        if sys.platform in ("win32", "cygwin"):
            return cls.WIN32
        return cls.LINUX
