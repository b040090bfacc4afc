"""Output schemas for API commands."""

from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema
from .config import ConfigGenerateOutput, ConfigPathOutput, ConfigValidateOutput, ConfigVersionOutput

__all__ = [
    "BaseOutputSchema",
    "ConfigGenerateOutput",
    "ConfigPathOutput",
    "ConfigValidateOutput",
    "ConfigVersionOutput",
    "get_output_schema",
    "register_output_schema",
]
