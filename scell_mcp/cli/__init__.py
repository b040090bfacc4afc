"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from scell_mcp.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] in ("--version", "-v"):
        from scell_mcp.api.config.get_package_version import get_package_version

        print(get_package_version())
        return 0

    try:
        app = _create_app()
        exit_code = app(argv, prog_name="scell-mcp", standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except click.exceptions.UsageError as e:
        typer.echo(f"Error: {e.format_message()}", err=True)
        typer.echo('Run "scell-mcp --help" for usage information.', err=True)
        return 1
    except click.exceptions.Abort:
        return 130
    except Exception as e:
        typer.echo(f"Unexpected error: {e}", err=True)
        return 1
