"""Unit tests for CLI command behavior."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from html_to_react import api
from html_to_react.application.results import ConversionResult
from html_to_react.cli import cli as cli_module
from html_to_react.errors import InvalidMarkupError, ScaffoldError

runner = CliRunner()


def _result(
    output_dir: Path, *, fallback: bool = False, installed: bool | None = None
) -> ConversionResult:
    component = output_dir / "src" / "components" / "ConvertedComponent.js"
    return ConversionResult(
        output_dir=output_dir,
        component_path=component,
        source_path=output_dir / "page.html",
        written=(component,),
        fallback_used=fallback,
        fallback_reason="Unterminated tag at offset 12" if fallback else None,
        installed=installed,
    )


def test_help_shows_commands() -> None:
    """Ensure top-level help lists the available subcommands."""
    result = runner.invoke(cli_module.app, ["--help"])
    assert result.exit_code == 0
    assert "convert" in result.output
    assert "doctor" in result.output


def test_convert_invokes_api(
    tmp_path: Path, write_html, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Ensure the convert command forwards expected args to the API layer."""
    source = write_html("<html><body><p>x</p></body></html>")
    output_dir = tmp_path / "app"
    captured: dict[str, object] = {}

    def fake_convert(**kwargs: object) -> ConversionResult:
        captured.update(kwargs)
        return _result(output_dir)

    monkeypatch.setattr(api, "convert_html_to_react", fake_convert)

    result = runner.invoke(
        cli_module.app,
        [
            "convert",
            str(source),
            str(output_dir),
            "--component-name",
            "Landing",
            "--drop-inline-styles",
            "--install",
        ],
    )

    assert result.exit_code == 0, result.output
    assert captured == {
        "input_path": source,
        "output_dir": output_dir,
        "component_name": "Landing",
        "drop_inline_styles": True,
        "install": True,
        "start": False,
    }
    assert "✓ Saved:" in result.output
    assert f"cd {output_dir}" in result.output
    assert "npm start" in result.output


def test_convert_reads_component_name_from_env(
    tmp_path: Path, write_html, monkeypatch: pytest.MonkeyPatch
) -> None:
    source = write_html("<html><body><p>x</p></body></html>")
    captured: dict[str, object] = {}

    def fake_convert(**kwargs: object) -> ConversionResult:
        captured.update(kwargs)
        return _result(tmp_path / "app")

    monkeypatch.setattr(api, "convert_html_to_react", fake_convert)
    result = runner.invoke(
        cli_module.app,
        ["convert", str(source), str(tmp_path / "app")],
        env={cli_module.COMPONENT_NAME_ENV: "FromEnv"},
    )
    assert result.exit_code == 0, result.output
    assert captured["component_name"] == "FromEnv"


def test_convert_reports_fallback(
    tmp_path: Path, write_html, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Succeed with a warning when the fallback component was written."""
    source = write_html("<html><body><p>x</p></body></html>")
    monkeypatch.setattr(
        api,
        "convert_html_to_react",
        lambda **_: _result(tmp_path / "app", fallback=True, installed=True),
    )
    result = runner.invoke(
        cli_module.app, ["convert", str(source), str(tmp_path / "app")]
    )
    assert result.exit_code == 0
    assert "Fallback component written" in result.output
    assert "npm install" not in result.output


def test_convert_maps_invalid_markup_to_exit_code(
    tmp_path: Path, write_html, monkeypatch: pytest.MonkeyPatch
) -> None:
    source = write_html("<div>no root</div>")

    def fake_convert(**_: object) -> ConversionResult:
        raise InvalidMarkupError("Invalid HTML: missing <html> tag")

    monkeypatch.setattr(api, "convert_html_to_react", fake_convert)
    result = runner.invoke(
        cli_module.app, ["convert", str(source), str(tmp_path / "app")]
    )
    assert result.exit_code == 2
    assert "InvalidMarkupError" in result.output
    assert "Traceback" not in result.output


def test_convert_debug_prints_traceback(
    tmp_path: Path, write_html, monkeypatch: pytest.MonkeyPatch
) -> None:
    source = write_html("<html><body><p>x</p></body></html>")

    def fake_convert(**_: object) -> ConversionResult:
        raise ScaffoldError("disk full")

    monkeypatch.setattr(api, "convert_html_to_react", fake_convert)
    result = runner.invoke(
        cli_module.app,
        ["--debug", "convert", str(source), str(tmp_path / "app")],
    )
    assert result.exit_code == 1
    assert "ScaffoldError: disk full" in result.output
    assert "Traceback" in result.output


def test_convert_handles_unexpected_errors(
    tmp_path: Path, write_html, monkeypatch: pytest.MonkeyPatch
) -> None:
    source = write_html("<html><body><p>x</p></body></html>")

    def fake_convert(**_: object) -> ConversionResult:
        raise RuntimeError("boom")

    monkeypatch.setattr(api, "convert_html_to_react", fake_convert)
    result = runner.invoke(
        cli_module.app, ["convert", str(source), str(tmp_path / "app")]
    )
    assert result.exit_code == 1
    assert "RuntimeError: boom" in result.output


def test_convert_requires_existing_input(tmp_path: Path) -> None:
    result = runner.invoke(
        cli_module.app,
        ["convert", str(tmp_path / "missing.html"), str(tmp_path / "app")],
    )
    assert result.exit_code != 0


def test_doctor_reports_missing_npm(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_module.shutil, "which", lambda _tool: None)
    result = runner.invoke(cli_module.app, ["doctor"])
    assert result.exit_code == 0
    assert "Python:" in result.output
    assert "npm: <not found>" in result.output
    assert "npm is required" in result.output


def test_print_conversion_error_defaults_exit_code() -> None:
    assert cli_module._print_conversion_error(ValueError("x"), debug=False) == 1
    assert (
        cli_module._print_conversion_error(InvalidMarkupError("x"), debug=False) == 2
    )
