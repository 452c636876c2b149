#!/usr/bin/env python3
"""
html_to_react.cli.cli

Typer-based CLI for converting a static HTML page into a React project.

Examples
--------
Convert a page and write the project to ``./my-app``:

    html-to-react convert page.html my-app

Convert, install dependencies and start the dev server:

    html-to-react convert page.html my-app --install --start
"""

from __future__ import annotations

import logging
import shutil
import sys
import traceback
from pathlib import Path

import typer

from html_to_react.application.options import DEFAULT_COMPONENT_NAME
from html_to_react.errors import ConversionError

app = typer.Typer(
    name="html-to-react",
    help="Convert static HTML documents into React components.",
    no_args_is_help=True,
)

COMPONENT_NAME_ENV = "HTML_TO_REACT_COMPONENT_NAME"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(debug: bool) -> None:
    """Route library logging to stderr.

    Parameters
    ----------
    debug : bool
        Whether to log at DEBUG instead of INFO.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        force=True,
    )


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo(
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            err=True,
        )
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False, "--debug", help="Verbose logging and full tracebacks on error."
    ),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug output.
    """
    _configure_logging(debug)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    input_path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="HTML document to convert.",
    ),
    output_dir: Path = typer.Argument(
        ..., file_okay=False, help="Directory for the generated React project."
    ),
    component_name: str = typer.Option(
        DEFAULT_COMPONENT_NAME,
        "--component-name",
        envvar=COMPONENT_NAME_ENV,
        help="PascalCase name of the generated component.",
    ),
    install: bool = typer.Option(
        False, "--install/--no-install", help="Run npm install after conversion."
    ),
    start: bool = typer.Option(
        False, "--start", help="Run npm start after conversion."
    ),
    drop_inline_styles: bool = typer.Option(
        False,
        "--drop-inline-styles",
        help="Remove inline style attributes instead of translating them.",
    ),
) -> None:
    """Convert an HTML document into a React project.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    input_path : Path
        HTML document to convert.
    output_dir : Path
        Project root to create or update.
    component_name : str
        Name of the generated component.

    Notes
    -----
    - A document without an ``<html>`` tag is rejected and nothing is written.
    - When the markup cannot be converted reliably, a fallback component
      embedding the original HTML is written and the command still succeeds.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from html_to_react.api import convert_html_to_react

        result = convert_html_to_react(
            input_path=input_path,
            output_dir=output_dir,
            component_name=component_name,
            drop_inline_styles=drop_inline_styles,
            install=install,
            start=start,
        )
    except ConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    if result.fallback_used:
        typer.secho(
            f"⚠ Fallback component written: {result.component_path}",
            fg=typer.colors.YELLOW,
        )
        typer.echo(
            "Check the HTML for validity or simplify complex structures, "
            "then convert again."
        )
    else:
        typer.secho(f"✓ Saved: {result.component_path}", fg=typer.colors.GREEN)
    typer.echo("To run your React app:")
    typer.echo(f"  cd {result.output_dir}")
    if not result.installed:
        typer.echo("  npm install")
    typer.echo("  npm start")


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed toolchain versions and Node.js availability."""
    import importlib.metadata as metadata

    modules = [
        "beautifulsoup4",
        "pydantic",
        "typer",
    ]

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in modules:
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    for tool in ("node", "npm"):
        location = shutil.which(tool)
        typer.echo(f"{tool}: {location or '<not found>'}")

    if shutil.which("npm") is None:
        typer.secho(
            "Note: npm is required for --install/--start; "
            "generated projects can still be installed manually.",
            fg=typer.colors.YELLOW,
        )


if __name__ == "__main__":
    app()
