"""string.Template engine — ``$name`` placeholders, no extra dependencies."""

from __future__ import annotations

from collections.abc import Mapping
from string import Template
from typing import Any

from template_registrar.plugins.contracts.engine import RenderFunction, TemplateEngine


class StringTemplateEngine(TemplateEngine):
    """Compile sources to ``string.Template`` and render with safe substitution.

    Uses $variable syntax so curly braces in markup or inline JS are not
    misinterpreted as placeholders. Unknown placeholders are left as-is.
    """

    def compile(self, source: str | None) -> RenderFunction:
        """Compile a source. An absent source compiles as empty text."""
        template = Template(source or "")

        def render(data: Mapping[str, Any]) -> str:
            return template.safe_substitute(data)

        return render
