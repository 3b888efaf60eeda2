"""Engine factory — build a bundled engine from its configured name."""

from __future__ import annotations

from template_registrar.config import Settings
from template_registrar.plugins.contracts.engine import TemplateEngine
from template_registrar.plugins.jinja_engine import Jinja2Engine
from template_registrar.plugins.string_engine import StringTemplateEngine


class UnknownEngineError(ValueError):
    """Raised when an engine name has no bundled implementation."""


class EngineFactory:
    """Static helpers for selecting a bundled engine."""

    NAMES = ("string", "jinja2")

    @staticmethod
    def create(name: str, settings: Settings | None = None) -> TemplateEngine:
        """Build the engine registered under ``name``.

        Raises:
            UnknownEngineError: If ``name`` is not one of ``EngineFactory.NAMES``.
        """
        if settings is None:
            settings = Settings()
        if name == "string":
            return StringTemplateEngine()
        if name == "jinja2":
            return Jinja2Engine(autoescape=settings.jinja_autoescape)
        raise UnknownEngineError(
            f"Unknown engine {name!r}; expected one of {', '.join(EngineFactory.NAMES)}",
        )
