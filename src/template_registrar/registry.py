"""Template registry — hold sources, compile on first use, render with data.

The engine only has one requirement: a ``compile`` method returning a
render function that takes the data mapping as its only argument.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from template_registrar.plugins.contracts.dom import DocumentQuery, MarkupWrapper
from template_registrar.plugins.contracts.engine import RenderFunction, TemplateEngine
from template_registrar.utils.coercion import Coercion

logger = logging.getLogger(__name__)


class DomNotImplementedError(NotImplementedError):
    """Raised by the default DOM slot until a wrapper is bound."""


def _dom_not_implemented(*args: object, **kwargs: object) -> object:
    raise DomNotImplementedError("template-registrar: dom NYI")


class TemplateRegistry:
    """Named template sources with a compile-once cache.

    The engine slot is class-level: one active engine per process, shared
    by every registry, last set wins. Compiled templates are cached per
    name and reused even if the source changes afterwards; call
    ``remove`` to force a recompile.

    Example:
        registry = TemplateRegistry().engine(StringTemplateEngine())
        registry.register("greet", "Hello $name")
        registry.render("greet", {"name": "World"})
    """

    _engine: ClassVar[TemplateEngine | None] = None

    def __init__(
        self,
        *,
        joint: str = "\n",
        document: DocumentQuery | None = None,
        dom: MarkupWrapper | Callable[..., object] = _dom_not_implemented,
    ) -> None:
        self.joint = joint
        self.document = document
        self.dom = dom
        self._sources: dict[str, str | None] = {}
        self._compiled: dict[str, RenderFunction | None] = {}

    def register(
        self,
        name: str | Mapping[str, Any],
        value: Any = None,
        options: Mapping[str, Any] | None = None,
    ) -> TemplateRegistry:
        """Register one template, or many from a mapping.

        Args:
            name: Template id, or a mapping of id to value. In the mapping
                form ``value`` is taken as the options for every entry.
            value: Source string, list of lines, zero-argument callable,
                or a compiled render function when ``is_compiled`` is set.
            options: ``query`` treats ``name`` as a selector (implied when
                ``name`` starts with ``#``); ``is_compiled`` stores
                ``value`` as the compiled template.

        Returns:
            The registry, for chaining.
        """
        if not isinstance(name, str):
            for key, item in name.items():
                self.register(key, item, value)
            return self

        if not isinstance(options, Mapping):
            options = {}

        if options.get("query") or name.startswith("#"):
            markup = self.document.inner_html(name) if self.document is not None else None
            if markup is None:
                logger.error(f'cannot find reference to "{name}" in DOM')
                return self
            self._sources[name] = markup
            return self

        if options.get("is_compiled"):
            self._compiled[name] = value
            return self

        self._sources[name] = Coercion.to_source(value, self.joint)
        return self

    add = register

    def remove(self, name: str) -> TemplateRegistry:
        """Clear both the source and the compiled template for ``name``."""
        self._sources[name] = None
        self._compiled[name] = None
        return self

    def retrieve(self, name: str) -> RenderFunction:
        """Return the compiled template for ``name``, compiling on first use.

        Without an engine the error is logged and the compile is still
        attempted, so the missing engine surfaces as an AttributeError.
        """
        compiled = self._compiled.get(name)
        if compiled:
            return compiled

        engine = TemplateRegistry._engine
        if not engine:
            logger.error("no template engine is available")
        compiled = engine.compile(self._sources.get(name))  # type: ignore[union-attr]
        self._compiled[name] = compiled
        return compiled

    def render(self, name: str, data: Mapping[str, Any] | None = None) -> str:
        """Render a registered template. Missing data renders with ``{}``."""
        return self.retrieve(name)(data or {})

    def render_dom(self, name: str, data: Mapping[str, Any] | None = None) -> object:
        """Render, then hand the markup to the bound DOM wrapper.

        Markup is passed through the wrapper's ``parse_html`` first when
        the wrapper has one.
        """
        wrap = self.dom
        parse = getattr(wrap, "parse_html", None)
        markup = self.render(name, data)
        return wrap(parse(markup) if parse else markup)

    def engine(
        self, eng: TemplateEngine | None = None,
    ) -> TemplateEngine | TemplateRegistry | None:
        """Get the active engine, or set it and return the registry."""
        if not eng:
            return TemplateRegistry._engine
        TemplateRegistry._engine = eng
        return self

    def to_json(self, key: str | None = None) -> str | None | dict[str, str | None]:
        """Return the registered source strings, or the one for ``key``."""
        if key:
            return self._sources.get(key)
        return dict(self._sources)


# Default registry instance (lazy)
_default_registry: TemplateRegistry | None = None


def get_default_registry() -> TemplateRegistry:
    """Get or create the default template registry."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry


def set_default_registry(registry: TemplateRegistry) -> None:
    """Set the default template registry."""
    global _default_registry
    _default_registry = registry
