"""Tests for CLI entry point."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from template_registrar.app import CLI
from template_registrar.config import Settings


@pytest.fixture()
def template_dir(tmp_path: Path) -> Path:
    """Directory with a couple of templates."""
    (tmp_path / "greet.html").write_text("  <p>Hello $name</p>\n", encoding="utf-8")
    (tmp_path / "items.html").write_text(
        "{% for i in items %}{{ i }},{% endfor %}", encoding="utf-8",
    )
    return tmp_path


def test_parser_render_defaults() -> None:
    """Parser fills render options from settings."""
    parser = CLI._build_parser(Settings(templates_dir="tpl", engine="jinja2"))
    args = parser.parse_args(["render", "greet"])
    assert args.command == "render"
    assert args.name == "greet"
    assert args.dir == "tpl"
    assert args.engine == "jinja2"
    assert args.data == "{}"


def test_cli_no_command_exits(capsys: pytest.CaptureFixture[str]) -> None:
    """CLI with no command prints help and exits 1."""
    with pytest.raises(SystemExit) as exc_info:
        CLI.main([])
    assert exc_info.value.code == 1


def test_cli_render(template_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """render prints the rendered template."""
    CLI.main([
        "render", "greet", "--dir", str(template_dir),
        "--engine", "string", "--data", '{"name": "World"}',
    ])
    assert capsys.readouterr().out == "<p>Hello World</p>\n"


def test_cli_render_jinja(template_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """render can use the Jinja2 engine."""
    CLI.main([
        "render", "items", "--dir", str(template_dir),
        "--engine", "jinja2", "--data", '{"items": [1, 2]}',
    ])
    assert capsys.readouterr().out == "1,2,\n"


def test_cli_render_bad_data(template_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Non-object JSON data exits 1 with an error."""
    with pytest.raises(SystemExit) as exc_info:
        CLI.main(["render", "greet", "--dir", str(template_dir), "--data", "[1]"])
    assert exc_info.value.code == 1
    assert "Error: --data must be a JSON object" in capsys.readouterr().err


def test_cli_list(template_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """list prints one registered name per line."""
    CLI.main(["list", "--dir", str(template_dir)])
    assert capsys.readouterr().out.splitlines() == ["greet", "items"]


def test_cli_show(template_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """show prints the stored (trimmed) source."""
    CLI.main(["show", "greet", "--dir", str(template_dir)])
    assert capsys.readouterr().out == "<p>Hello $name</p>\n"


def test_cli_show_unknown(template_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """show for an unknown name exits 1."""
    with pytest.raises(SystemExit) as exc_info:
        CLI.main(["show", "nope", "--dir", str(template_dir)])
    assert exc_info.value.code == 1
    assert "Template not registered: nope" in capsys.readouterr().err


def test_cli_entry_point_installed() -> None:
    """python -m template_registrar.app is callable."""
    result = subprocess.run(
        [sys.executable, "-m", "template_registrar.app"],
        capture_output=True, text=True, timeout=5,
    )
    # Should print help (no command given) and exit 1
    assert result.returncode == 1


def test_cli_list_skips_undecodable_file(
    template_dir: Path, capsys: pytest.CaptureFixture[str],
) -> None:
    """An undecodable template file does not stop the other commands."""
    (template_dir / "broken.html").write_bytes(b"\xff\xfe bad")
    CLI.main(["list", "--dir", str(template_dir)])
    assert capsys.readouterr().out.splitlines() == ["greet", "items"]
