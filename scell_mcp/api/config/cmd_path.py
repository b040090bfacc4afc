"""Path command - reports where a client expects its MCP configuration."""

from collections.abc import Iterator, Mapping

from .._output_schemas.config import ConfigPathOutput
from ..StageResult import StageResult
from .get_config_path import get_config_path
from .McpClient import McpClient
from .Platform import Platform
from .resolve_config import resolve_home


def cmd_path(
    client: McpClient | str,
    platform: Platform | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> StageResult:
    """Resolve the configuration file path for a client.

    Args:
        client: claude, cursor, vscode or generic
        platform: darwin, win32 or linux (defaults to the running platform)
        environ: Environment mapping providing HOME/USERPROFILE/APPDATA

    Returns:
        StageResult with the resolved path
    """
    client_name = getattr(client, "value", client)
    platform_name = getattr(platform, "value", platform) or Platform.current().value

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Resolving configuration path...")
        env = environ or {}
        try:
            path = get_config_path(client_name, platform_name, home=resolve_home(env), appdata=env.get("APPDATA"))
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Cannot resolve path: {e}"
            result_obj.output = ConfigPathOutput(
                errors=[str(e)],
                warnings=[],
                client=client_name,
                platform=platform_name,
                config_path="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Configuration path for {client_name}: {path}"
        result_obj.output = ConfigPathOutput(
            errors=[],
            warnings=[],
            client=client_name,
            platform=platform_name,
            config_path=path,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Resolving MCP configuration path for '{client_name}'...",
        progress_callback=do_work,
    )
