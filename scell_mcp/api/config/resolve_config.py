"""Resolve generation inputs from command-line values and the environment."""

from collections.abc import Mapping
from typing import Any

from ...constants import API_KEY_ENV, BASE_URL_ENV


def resolve_config(
    api_key: str | None = None,
    base_url: str | None = None,
    environment: str | None = None,
    sandbox: bool = False,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Merge explicit values with ``SCELL_API_KEY``/``SCELL_BASE_URL`` fallbacks.

    Explicit values always win. Only the mapping passed as ``environ`` is
    consulted; callers pass ``os.environ`` when they want the process
    environment.

    Returns:
        Raw mapping suitable for ``validate_config``; unset fields are omitted
    """
    environ = environ or {}
    resolved: dict[str, Any] = {}

    api_key = api_key or environ.get(API_KEY_ENV)
    if api_key:
        resolved["api_key"] = api_key

    base_url = base_url or environ.get(BASE_URL_ENV)
    if base_url:
        resolved["base_url"] = base_url

    if environment is not None:
        resolved["environment"] = getattr(environment, "value", environment)
    if sandbox:
        resolved["sandbox"] = True
    return resolved


def resolve_home(environ: Mapping[str, str] | None = None) -> str:
    """Return the user's home directory from ``HOME`` or ``USERPROFILE`` (``~`` if neither)."""
    environ = environ or {}
    return environ.get("HOME") or environ.get("USERPROFILE") or "~"
