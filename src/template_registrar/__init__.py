"""template-registrar: named templates, compiled on first use by a pluggable engine."""

__version__ = "0.1.0"

from template_registrar.plugins.contracts.dom import DocumentQuery, MarkupWrapper
from template_registrar.plugins.contracts.engine import TemplateEngine
from template_registrar.plugins.factory import EngineFactory, UnknownEngineError
from template_registrar.plugins.jinja_engine import Jinja2Engine
from template_registrar.plugins.string_engine import StringTemplateEngine
from template_registrar.registry import (
    DomNotImplementedError,
    TemplateRegistry,
    get_default_registry,
    set_default_registry,
)
from template_registrar.sources import TemplateSources

__all__ = [
    "__version__",
    "DocumentQuery",
    "DomNotImplementedError",
    "EngineFactory",
    "Jinja2Engine",
    "MarkupWrapper",
    "StringTemplateEngine",
    "TemplateEngine",
    "TemplateRegistry",
    "TemplateSources",
    "UnknownEngineError",
    "get_default_registry",
    "set_default_registry",
]
