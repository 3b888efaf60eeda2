"""Configuration package — re-exports for convenience."""

from template_registrar.config.loader import ConfigLoader
from template_registrar.config.settings import Settings

__all__ = ["ConfigLoader", "Settings"]
