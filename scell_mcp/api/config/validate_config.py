"""Validate a (possibly partial) Scell MCP configuration."""

import logging
from collections.abc import Mapping
from typing import Any

from ...constants import API_KEY_MIN_LENGTH
from .Environment import Environment
from .ValidationResult import ValidationResult

logger = logging.getLogger(__name__)

# Accepted spellings for each field (snake_case first, then camelCase)
_FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "api_key": ("api_key", "apiKey"),
    "base_url": ("base_url", "baseUrl"),
    "environment": ("environment",),
    "sandbox": ("sandbox",),
}


def _get(config: Mapping[str, Any], name: str) -> Any:
    for key in _FIELD_KEYS[name]:
        if config.get(key) is not None:
            return config[key]
    return None


def _validate_known_keys(config: Mapping[str, Any]) -> list[str]:
    known = {key for keys in _FIELD_KEYS.values() for key in keys}
    return [f"Unknown configuration key: {key}" for key in config if key not in known]


def _validate_api_key(api_key: Any) -> list[str]:
    if not api_key:
        return ["API key is required"]
    if not isinstance(api_key, str):
        return ["API key must be a string"]
    if len(api_key) < API_KEY_MIN_LENGTH:
        return ["API key appears to be too short"]
    return []


def _validate_base_url(base_url: Any) -> list[str]:
    if base_url is None:
        return []
    if not isinstance(base_url, str):
        return ["Base URL must be a string"]
    if not base_url.startswith(("http://", "https://")):
        return ["Base URL must start with http:// or https://"]
    return []


def _validate_environment(environment: Any) -> list[str]:
    if environment is None:
        return []
    valid_envs = [env.value for env in Environment]
    value = environment.value if isinstance(environment, Environment) else environment
    if value not in valid_envs:
        return [f"Environment must be one of: {', '.join(valid_envs)}"]
    return []


def _validate_sandbox(sandbox: Any) -> list[str]:
    if sandbox is None or isinstance(sandbox, bool):
        return []
    return ["Sandbox must be a boolean"]


def validate_config(config: Mapping[str, Any]) -> ValidationResult:
    """Validate a Scell MCP configuration.

    Every rule runs regardless of earlier failures, so the result lists all
    problems at once.

    Args:
        config: Mapping with ``api_key``/``apiKey``, ``base_url``/``baseUrl``,
            ``environment`` and ``sandbox`` entries; any of them may be missing,
            any other key is reported as unknown

    Returns:
        ValidationResult with the accumulated error messages
    """
    errors: list[str] = []
    errors.extend(_validate_api_key(_get(config, "api_key")))
    errors.extend(_validate_base_url(_get(config, "base_url")))
    errors.extend(_validate_environment(_get(config, "environment")))
    errors.extend(_validate_sandbox(_get(config, "sandbox")))
    errors.extend(_validate_known_keys(config))
    if errors:
        logger.debug("Configuration rejected with %d error(s)", len(errors))
    return ValidationResult(errors=errors)
