"""ConfigLoader — layer overrides, TEMPLATE_REGISTRAR_* env vars and per-env YAML."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import EnvSettingsSource

from template_registrar.config.settings import ENV_PREFIX, Settings

_CONFIG_ROOT = Path(__file__).resolve().parent
_DEFAULT_ENV = "dev"


class ConfigLoader:
    """Build Settings for a named environment. All methods are static."""

    @staticmethod
    def current_env() -> str:
        """Environment name from ``TEMPLATE_REGISTRAR_ENV`` (``dev`` if unset)."""
        return os.environ.get(f"{ENV_PREFIX}ENV", _DEFAULT_ENV)

    @staticmethod
    def settings_path(env: str) -> Path:
        """Location of the YAML file for ``env``."""
        return _CONFIG_ROOT / env / "settings.yaml"

    @staticmethod
    def read_yaml(path: Path) -> dict[str, Any]:
        """Parse a settings file. Missing or non-mapping files give ``{}``."""
        if not path.is_file():
            return {}
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}

    @staticmethod
    def load_settings(env: str | None = None, **overrides: Any) -> Settings:
        """Build Settings with priority: overrides > env vars > YAML > defaults.

        Args:
            env: Config directory to read; defaults to ``current_env()``.
            overrides: Field values that win over every other layer.
        """
        file_values = ConfigLoader.read_yaml(
            ConfigLoader.settings_path(env or ConfigLoader.current_env()),
        )
        # Init kwargs outrank env vars in pydantic-settings, so env values are
        # merged over the file layer here instead of left to Settings().
        env_values = EnvSettingsSource(Settings)()
        return Settings(**{**file_values, **env_values, **overrides})
