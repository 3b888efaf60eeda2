"""Source coercion — turn registered template values into trimmed strings."""

from __future__ import annotations

import inspect
import logging
from typing import Any

logger = logging.getLogger(__name__)


class Coercion:
    """Static helpers for normalising template sources."""

    @staticmethod
    def takes_no_arguments(value: Any) -> bool:
        """Return True when ``value`` is a callable that can be called bare."""
        if not callable(value):
            return False
        try:
            inspect.signature(value).bind()
        except (TypeError, ValueError):
            return False
        return True

    @staticmethod
    def to_source(value: Any, joint: str = "\n") -> str:
        """Coerce a template value to a trimmed string.

        A zero-argument callable is invoked once and its return value
        coerced instead (the result is not invoked again). Strings are
        trimmed; lists and tuples are joined with ``joint`` and trimmed,
        with ``None`` items rendered empty. Anything else, including
        callables that need arguments, is logged and replaced with an
        empty string.
        """
        if Coercion.takes_no_arguments(value):
            value = value()
        if isinstance(value, str):
            return value.strip()
        if isinstance(value, (list, tuple)):
            parts = ("" if part is None else str(part) for part in value)
            return joint.join(parts).strip()
        logger.error(f"template (or the return value) was of unknown type: {value!r}")
        return ""
