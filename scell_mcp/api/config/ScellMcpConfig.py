"""Validated input for MCP configuration generation."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .ConfigValidationError import ConfigValidationError
from .Environment import Environment
from .validate_config import validate_config


class ScellMcpConfig(BaseModel):
    """Scell.io connection settings for a single generation call."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    api_key: str = Field(..., min_length=10, alias="apiKey", description="Scell.io API key")
    base_url: str | None = Field(
        default=None,
        alias="baseUrl",
        pattern=r"^https?://",
        description="API base URL (defaults to https://api.scell.io/api)",
    )
    environment: Environment | None = Field(default=None, description="production, staging or development")
    sandbox: bool = Field(default=False, description="Target the sandbox endpoint")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ScellMcpConfig":
        """Validate a raw mapping and build the config from it.

        Raises:
            ConfigValidationError: With every validation message if the mapping is invalid
        """
        result = validate_config(raw)
        if not result.valid:
            raise ConfigValidationError(result.errors)
        data = {key: value for key, value in raw.items() if value is not None}
        try:
            return cls(**data)
        except ValidationError as e:
            messages = [f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()]
            raise ConfigValidationError(messages) from e
