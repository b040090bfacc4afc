"""Outcome of validating a Scell MCP configuration."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationResult:
    """All errors found in a configuration; valid only when there are none."""

    errors: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors
