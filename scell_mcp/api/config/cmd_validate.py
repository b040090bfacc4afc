"""Validate command - checks generation inputs without generating anything."""

from collections.abc import Iterator, Mapping

from .._output_schemas.config import ConfigValidateOutput
from ..StageResult import StageResult
from .resolve_config import resolve_config
from .validate_config import validate_config


def cmd_validate(
    api_key: str | None = None,
    base_url: str | None = None,
    environment: str | None = None,
    sandbox: bool = False,
    environ: Mapping[str, str] | None = None,
) -> StageResult:
    """Validate a Scell MCP configuration.

    Args:
        api_key: Scell.io API key (falls back to ``SCELL_API_KEY`` in ``environ``)
        base_url: API base URL (falls back to ``SCELL_BASE_URL`` in ``environ``)
        environment: production, staging or development
        sandbox: Whether sandbox mode is requested
        environ: Environment mapping consulted for fallbacks

    Returns:
        StageResult whose output lists every validation error
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Resolving configuration...")
        raw = resolve_config(api_key, base_url, environment, sandbox, environ)

        yield (0.7, "Validating configuration...")
        validation = validate_config(raw)

        yield (1.0, "Complete")
        if validation.valid:
            result_obj.result = "Configuration is valid"
        else:
            result_obj.result = f"Configuration validation failed ({len(validation.errors)} error(s))"
        result_obj.output = ConfigValidateOutput(
            errors=validation.errors,
            warnings=[],
            valid=validation.valid,
        ).model_dump(mode="python")
        result_obj.success = validation.valid

    return StageResult(
        announce="Validating Scell MCP configuration...",
        progress_callback=do_work,
    )
