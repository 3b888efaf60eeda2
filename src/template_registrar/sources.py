"""Template sources from disk — register files under their stem."""

from __future__ import annotations

import logging
from pathlib import Path

from template_registrar.registry import TemplateRegistry

logger = logging.getLogger(__name__)


class TemplateSources:
    """Static helpers for filling a registry from template files."""

    @staticmethod
    def load_file(registry: TemplateRegistry, path: str | Path) -> str:
        """Register one file under its stem and return that name.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Template not found: {path}")
        registry.register(path.stem, path.read_text(encoding="utf-8"))
        return path.stem

    @staticmethod
    def load_directory(
        registry: TemplateRegistry,
        directory: str | Path,
        pattern: str = "*.html",
    ) -> int:
        """Register every file in ``directory`` matching ``pattern``.

        Returns:
            Number of templates registered.
        """
        directory = Path(directory)
        if not directory.is_dir():
            logger.warning(f"Templates directory not found: {directory}")
            return 0

        count = 0
        for path in sorted(directory.glob(pattern)):
            if not path.is_file():
                continue
            try:
                name = TemplateSources.load_file(registry, path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to load template {path}: {e}")
                continue
            logger.debug(f"Loaded template: {name}")
            count += 1

        logger.info(f"Loaded {count} templates from {directory}")
        return count
