"""Settings model — pydantic-settings with env var support."""

from __future__ import annotations

from pydantic_settings import BaseSettings

ENV_PREFIX = "TEMPLATE_REGISTRAR_"


class Settings(BaseSettings):
    """Registrar settings.

    Use ``ConfigLoader.load_settings()`` to build with YAML + env var layering.
    Direct construction (e.g. in tests) skips YAML loading.
    """

    joint: str = "\n"
    engine: str = "string"
    jinja_autoescape: bool = False
    templates_dir: str = "templates"
    template_pattern: str = "*.html"
    log_level: str = "WARNING"

    model_config = {"env_prefix": ENV_PREFIX}
