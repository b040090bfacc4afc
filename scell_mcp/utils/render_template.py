"""Thin wrapper around Jinja2 for rendering text output."""

from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined

_ENV = Environment(loader=BaseLoader(), trim_blocks=True, lstrip_blocks=True, undefined=StrictUndefined)


def render_template(template: str, context: dict[str, Any]) -> str:
    return _ENV.from_string(template).render(**context)
