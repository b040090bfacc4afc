"""Output schemas for config commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigGenerateOutput(BaseOutputSchema):
    """Output schema for the generate command.

    Output structure:
    - errors: list[str] - validation or write errors, empty list if none
    - warnings: list[str] - warnings, empty list if none
    - client: str - target client (claude, cursor, vscode, generic)
    - config_path: str - where the client expects the configuration file
    - content: str - generated configuration text, empty string on failure
    - written_to: str - file the content was written to, empty string if printed
    """

    client: str = Field(..., description="Target MCP client")
    config_path: str = Field(..., description="Conventional configuration file path for the client")
    content: str = Field(..., description="Generated configuration text, empty string on failure")
    written_to: str = Field(..., description="Path the content was written to, empty string if not written")


class ConfigValidateOutput(BaseOutputSchema):
    """Output schema for the validate command."""

    valid: bool = Field(..., description="True when no validation errors were found")


class ConfigPathOutput(BaseOutputSchema):
    """Output schema for the path command."""

    client: str = Field(..., description="Target MCP client")
    platform: str = Field(..., description="Operating system the path was resolved for")
    config_path: str = Field(..., description="Conventional configuration file path, empty string on failure")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for the version command."""

    version: str = Field(..., description="Package version string")


# Register schemas
register_output_schema("config", "generate", ConfigGenerateOutput)
register_output_schema("config", "validate", ConfigValidateOutput)
register_output_schema("config", "path", ConfigPathOutput)
register_output_schema("config", "version", ConfigVersionOutput)
