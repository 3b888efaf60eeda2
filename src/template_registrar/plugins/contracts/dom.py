"""DOM plugin contracts — selector lookup and markup wrapping."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol


class DocumentQuery(ABC):
    """Resolves a selector against a document.

    Used only when a template is registered by selector (``#id`` names or
    the ``query`` option).
    """

    @abstractmethod
    def inner_html(self, selector: str) -> str | None:
        """Return the inner markup of the first matching element, or None."""


class MarkupWrapper(Protocol):
    """Wraps rendered markup into a DOM library object.

    Implementations may also expose ``parse_html(markup)``; when they do,
    the markup is parsed before it is wrapped.
    """

    def __call__(self, markup: object) -> object: ...
