"""Shared fixtures for template_registrar tests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from template_registrar import registry as registry_module
from template_registrar.plugins.contracts.engine import RenderFunction, TemplateEngine
from template_registrar.registry import TemplateRegistry


class BracketEngine(TemplateEngine):
    """Stub engine rendering ``[source]`` and counting compile calls."""

    def __init__(self) -> None:
        self.compiled: list[str | None] = []

    def compile(self, source: str | None) -> RenderFunction:
        self.compiled.append(source)

        def render(data: Mapping[str, Any]) -> str:
            return f"[{source}]"

        return render


@pytest.fixture(autouse=True)
def _reset_process_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear the process-wide engine and default registry around each test."""
    monkeypatch.setattr(TemplateRegistry, "_engine", None)
    monkeypatch.setattr(registry_module, "_default_registry", None)


@pytest.fixture()
def engine() -> BracketEngine:
    """Fresh stub engine."""
    return BracketEngine()


@pytest.fixture()
def registry(engine: BracketEngine) -> TemplateRegistry:
    """Registry with the stub engine configured."""
    reg = TemplateRegistry()
    reg.engine(engine)
    return reg
