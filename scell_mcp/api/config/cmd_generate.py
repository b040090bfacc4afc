"""Generate command - produces the MCP configuration for a client."""

import logging
from collections.abc import Iterator, Mapping

from ...utils.mask_api_key import mask_api_key
from .._output_schemas.config import ConfigGenerateOutput
from ..StageResult import StageResult
from .generate_client_config import generate_client_config
from .generate_config_with_instructions import generate_config_with_instructions
from .get_config_path import get_config_path
from .McpClient import McpClient
from .Platform import Platform
from .render_config import render_config
from .resolve_config import resolve_config, resolve_home
from .ScellMcpConfig import ScellMcpConfig
from .validate_config import validate_config
from .write_config import write_config

logger = logging.getLogger(__name__)


def cmd_generate(
    client: McpClient | str,
    api_key: str | None = None,
    base_url: str | None = None,
    environment: str | None = None,
    sandbox: bool = False,
    output: str | None = None,
    environ: Mapping[str, str] | None = None,
    platform: Platform | str | None = None,
) -> StageResult:
    """Generate Scell MCP configuration for a client.

    Claude, Cursor and VS Code get the bare JSON document; the generic client
    gets the document preceded by a comment header listing the available tools.

    Args:
        client: claude, cursor, vscode or generic
        api_key: Scell.io API key (falls back to ``SCELL_API_KEY`` in ``environ``)
        base_url: API base URL (falls back to ``SCELL_BASE_URL`` in ``environ``)
        environment: production, staging or development
        sandbox: Target the sandbox endpoint
        output: File to write the configuration to instead of returning it for display
        environ: Environment mapping consulted for fallbacks and the home directory
        platform: Operating system used to resolve the client's config path

    Returns:
        StageResult with the generated content and the client's config path
    """
    client_name = getattr(client, "value", client)
    platform_name = getattr(platform, "value", platform) or Platform.current().value

    def _fail(result_obj: StageResult, message: str, errors: list[str], config_path: str = "") -> None:
        result_obj.result = message
        result_obj.output = ConfigGenerateOutput(
            errors=errors,
            warnings=[],
            client=client_name,
            config_path=config_path,
            content="",
            written_to="",
        ).model_dump(mode="python")
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Resolving configuration...")
        env = environ or {}
        home = resolve_home(env)
        appdata = env.get("APPDATA")
        try:
            target = McpClient(client_name)
            config_path = get_config_path(target, platform_name, home=home, appdata=appdata)
        except ValueError as e:
            yield (1.0, "Complete")
            _fail(result_obj, f"Cannot generate configuration: {e}", [str(e)])
            return
        raw = resolve_config(api_key, base_url, environment, sandbox, env)

        yield (0.3, "Validating configuration...")
        validation = validate_config(raw)
        if not validation.valid:
            yield (1.0, "Complete")
            _fail(result_obj, "Configuration validation failed:", validation.errors, config_path)
            return
        config = ScellMcpConfig(**raw)
        logger.debug("Generating %s configuration for key %s", target.value, mask_api_key(config.api_key))

        yield (0.6, "Generating configuration...")
        if target is McpClient.GENERIC:
            content = generate_config_with_instructions(config, target, platform_name, home=home, appdata=appdata)
        else:
            content = render_config(generate_client_config(target, config))

        written_to = ""
        if output:
            yield (0.8, "Writing configuration file...")
            try:
                written_to = str(write_config(output, content + "\n"))
            except (OSError, RuntimeError) as e:
                yield (1.0, "Complete")
                _fail(result_obj, f"Error writing file: {e}", [f"Error writing file: {e}"], config_path)
                return

        yield (1.0, "Complete")
        if written_to:
            result_obj.result = f"Configuration written to: {written_to}"
        else:
            result_obj.result = f"Save this configuration to: {config_path}"
        result_obj.output = ConfigGenerateOutput(
            errors=[],
            warnings=[],
            client=target.value,
            config_path=config_path,
            content=content,
            written_to=written_to,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Generating Scell MCP configuration for '{client_name}'...",
        progress_callback=do_work,
    )
