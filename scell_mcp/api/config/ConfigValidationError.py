"""Error raised when a Scell MCP configuration fails validation."""


class ConfigValidationError(ValueError):
    """Raised when configuration is invalid.

    Carries every validation message, not only the first one.
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        message = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in self.errors)
        super().__init__(message)
