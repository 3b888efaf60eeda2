"""Jinja2 engine — full Jinja syntax (conditionals, loops, filters)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jinja2 import Environment

from template_registrar.plugins.contracts.engine import RenderFunction, TemplateEngine


class Jinja2Engine(TemplateEngine):
    """Compile sources with a shared ``jinja2.Environment``."""

    def __init__(self, *, autoescape: bool = False) -> None:
        self._environment = Environment(autoescape=autoescape)

    def compile(self, source: str | None) -> RenderFunction:
        """Compile a source. An absent source compiles as empty text."""
        template = self._environment.from_string(source or "")

        def render(data: Mapping[str, Any]) -> str:
            return template.render(data)

        return render
