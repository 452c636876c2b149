"""Top-level API for HTML-to-React conversion."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from html_to_react.application.options import DEFAULT_COMPONENT_NAME

if TYPE_CHECKING:
    from html_to_react.application.results import ConversionResult

__version__ = "0.1.0"


def convert_html_to_react(
    input_path: Path,
    output_dir: Path,
    *,
    component_name: str = DEFAULT_COMPONENT_NAME,
    drop_inline_styles: bool = False,
    install: bool = False,
    start: bool = False,
) -> ConversionResult:
    """Convert a static HTML document into a runnable React project.

    Parameters
    ----------
    input_path : Path
        HTML document to convert.
    output_dir : Path
        Project root to create or update.
    component_name : str, default=DEFAULT_COMPONENT_NAME
        PascalCase name of the generated component.
    drop_inline_styles : bool, default=False
        Remove inline ``style`` attributes instead of translating them.
    install : bool, default=False
        Run ``npm install`` in the generated project.
    start : bool, default=False
        Run ``npm start`` after conversion.

    Returns
    -------
    ConversionResult
        Written files and whether the fallback component was used.
    """
    from .api import convert_html_to_react as _impl

    return _impl(
        input_path=input_path,
        output_dir=output_dir,
        component_name=component_name,
        drop_inline_styles=drop_inline_styles,
        install=install,
        start=start,
    )


__all__ = ["convert_html_to_react"]
