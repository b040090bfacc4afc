"""Print generated configuration text for the generate commands."""

import sys


def _print_generated(output: dict) -> None:
    """Write the generated configuration to STDOUT, or its errors to STDERR.

    Nothing reaches STDOUT when the configuration was written to a file.
    """
    if output.get("errors"):
        for error in output["errors"]:
            sys.stderr.write(f"  - {error}\n")
        return
    if output.get("content") and not output.get("written_to"):
        sys.stdout.write(output["content"] + "\n")
