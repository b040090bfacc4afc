"""Create the main Typer CLI app."""

import logging
import os

import typer

from scell_mcp.api.config.cmd_generate import cmd_generate
from scell_mcp.api.config.cmd_path import cmd_path
from scell_mcp.api.config.cmd_validate import cmd_validate
from scell_mcp.api.config.cmd_version import cmd_version
from scell_mcp.api.config.Environment import Environment
from scell_mcp.api.config.McpClient import McpClient
from scell_mcp.api.config.Platform import Platform
from scell_mcp.constants import DEFAULT_BASE_URL, DOCS_URL
from scell_mcp.logging_config import setup_logging

from ._handle_stage_result import _handle_stage_result
from ._print_generated import _print_generated

_GENERATE_HELP = {
    McpClient.CLAUDE: "Generate Claude Desktop configuration",
    McpClient.CURSOR: "Generate Cursor IDE configuration",
    McpClient.VSCODE: "Generate VS Code configuration",
    McpClient.GENERIC: "Generate generic MCP configuration with usage notes",
}

_EPILOG = (
    "Environment variables: SCELL_API_KEY (default API key), SCELL_BASE_URL (default base URL). "
    f"More information: {DOCS_URL}"
)

_API_KEY_HELP = "Scell.io API key (defaults to $SCELL_API_KEY)"
_BASE_URL_HELP = f"Custom API base URL (default: {DEFAULT_BASE_URL})"
_ENV_HELP = "Environment: production, staging, development"
_SANDBOX_HELP = "Use sandbox mode (appends /sandbox to base URL)"


def _register_generate_command(app: typer.Typer, client: McpClient) -> None:
    @app.command(name=client.value, help=_GENERATE_HELP[client])
    def generate_cmd(
        api_key: str | None = typer.Argument(None, help=_API_KEY_HELP, show_default=False),
        base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP),
        environment: Environment | None = typer.Option(None, "--env", help=_ENV_HELP),
        sandbox: bool = typer.Option(False, "--sandbox", help=_SANDBOX_HELP),
        output: str | None = typer.Option(None, "--output", "-o", help="Write configuration to file instead of stdout"),
    ) -> None:
        _handle_stage_result(cmd_generate, result_printer=_print_generated)(
            client,
            api_key=api_key,
            base_url=base_url,
            environment=environment,
            sandbox=sandbox,
            output=output,
            environ=os.environ,
        )


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        name="scell-mcp",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Scell.io MCP Configuration Generator",
        epilog=_EPILOG,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
        no_args_is_help=False,
    )

    for client in McpClient:
        _register_generate_command(app, client)

    @app.command(name="validate")
    def validate_cmd(
        api_key: str | None = typer.Argument(None, help=_API_KEY_HELP, show_default=False),
        base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP),
        environment: Environment | None = typer.Option(None, "--env", help=_ENV_HELP),
        sandbox: bool = typer.Option(False, "--sandbox", help=_SANDBOX_HELP),
    ) -> None:
        """Validate configuration values without generating anything."""
        _handle_stage_result(cmd_validate)(
            api_key=api_key,
            base_url=base_url,
            environment=environment,
            sandbox=sandbox,
            environ=os.environ,
        )

    @app.command(name="path")
    def path_cmd(
        client: McpClient = typer.Argument(..., help="MCP client"),
        platform: Platform | None = typer.Option(None, "--platform", help="Operating system (default: current)"),
    ) -> None:
        """Show where a client reads its MCP configuration from."""
        _handle_stage_result(cmd_path)(client, platform=platform, environ=os.environ)

    @app.command(name="version")
    def version_cmd() -> None:
        """Show version information."""
        _handle_stage_result(cmd_version)()

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        setup_logging(logging.DEBUG if verbose else logging.WARNING)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
