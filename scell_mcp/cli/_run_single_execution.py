"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from typing import TypeVar

from scell_mcp.api.validate_output import validate_output

from .display.Display import Display

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
) -> None:
    """Run command once, display the result and exit with its status.

    Commands handle expected failures internally and report them through
    their output schema.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        display.info(f"[dim]Progress: {message} ({progress_percent:.0%})[/dim]")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Output that does not match its schema is a programming error
    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        raise ValueError(f"Output structure validation failed: {e}") from e

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    if result_printer:
        result_printer(result.output)
    else:
        display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
