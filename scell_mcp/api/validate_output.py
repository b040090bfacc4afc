"""Validate command output dicts against their registered schemas."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import _registry


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` against the schema registered for ``func``.

    The domain comes from the module path (``scell_mcp.api.<domain>.cmd_<name>``)
    and the command name from the function name. Functions outside the API
    package, or without a registered schema, are passed through unchanged.

    Raises:
        ValueError: If the output does not match the schema
    """
    parts = func.__module__.split(".")
    if len(parts) < 3 or parts[1] != "api":
        return output
    domain = parts[2]
    command_name = func.__name__.removeprefix("cmd_")

    schema = _registry.get_output_schema(domain, command_name)
    if schema is None:
        return output
    try:
        return schema(**output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"Output validation failed for {domain}.{command_name}: {e}") from e
