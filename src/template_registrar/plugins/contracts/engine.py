"""Engine plugin contract — anything that compiles a source into a render function."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

RenderFunction = Callable[[Mapping[str, Any]], str]


class TemplateEngine(ABC):
    """Compiles template sources into render functions.

    Mustache, Handlebars and Jinja-style libraries all fit this shape:
    compile once, then call the result with the data to render. The
    registry only relies on ``compile`` being present, so any object
    exposing it works even without subclassing.
    """

    @abstractmethod
    def compile(self, source: str | None) -> RenderFunction:
        """Compile a template source.

        Args:
            source: The stored template source. ``None`` when nothing
                was registered under the requested name.

        Returns:
            A callable taking the data mapping and returning rendered text.
        """
