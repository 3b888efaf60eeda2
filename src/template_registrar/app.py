"""Command-line entry point — load, inspect and render templates."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from template_registrar.config import ConfigLoader, Settings
from template_registrar.plugins.factory import EngineFactory
from template_registrar.registry import TemplateRegistry
from template_registrar.sources import TemplateSources


class CLI:
    """Command-line interface for template-registrar."""

    @staticmethod
    def _build_parser(settings: Settings) -> argparse.ArgumentParser:
        """Build the CLI argument parser with settings as defaults."""
        parser = argparse.ArgumentParser(
            prog="template-registrar", description="Template Registrar CLI",
        )
        parser.add_argument("--log-level", default=settings.log_level)
        subparsers = parser.add_subparsers(dest="command")

        source_args = argparse.ArgumentParser(add_help=False)
        source_args.add_argument("--dir", default=settings.templates_dir)
        source_args.add_argument("--pattern", default=settings.template_pattern)

        render_parser = subparsers.add_parser(
            "render", parents=[source_args], help="Render a template",
        )
        render_parser.add_argument("name")
        render_parser.add_argument("--data", default="{}", help="JSON object passed to the template")
        render_parser.add_argument(
            "--engine", default=settings.engine, choices=EngineFactory.NAMES,
        )

        subparsers.add_parser("list", parents=[source_args], help="List template names")

        show_parser = subparsers.add_parser(
            "show", parents=[source_args], help="Print a template source",
        )
        show_parser.add_argument("name")

        return parser

    @staticmethod
    def _load(settings: Settings, args: argparse.Namespace) -> TemplateRegistry:
        """Build a registry filled from the requested directory."""
        registry = TemplateRegistry(joint=settings.joint)
        TemplateSources.load_directory(registry, args.dir, args.pattern)
        return registry

    @staticmethod
    def _run(settings: Settings, args: argparse.Namespace) -> None:
        """Dispatch a parsed command."""
        registry = CLI._load(settings, args)

        if args.command == "render":
            data = json.loads(args.data)
            if not isinstance(data, dict):
                raise ValueError("--data must be a JSON object")
            registry.engine(EngineFactory.create(args.engine, settings))
            print(registry.render(args.name, data))
        elif args.command == "list":
            for name, source in registry.to_json().items():
                if source is not None:
                    print(name)
        elif args.command == "show":
            source = registry.to_json(args.name)
            if source is None:
                raise ValueError(f"Template not registered: {args.name}")
            print(source)

    @staticmethod
    def main(argv: list[str] | None = None) -> None:
        """CLI entry point. Catches all exceptions and exits cleanly."""
        settings = ConfigLoader.load_settings()
        parser = CLI._build_parser(settings)
        args = parser.parse_args(argv)

        if args.command is None:
            parser.print_help()
            sys.exit(1)

        try:
            logging.basicConfig(
                level=args.log_level.upper(),
                format="%(levelname)s %(name)s: %(message)s",
            )
            CLI._run(settings, args)
        except KeyboardInterrupt:
            pass
        except Exception as error:
            print(f"Error: {error}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    CLI.main()
