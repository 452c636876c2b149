"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path

from html_to_react.application.options import DEFAULT_COMPONENT_NAME
from html_to_react.application.results import ConversionResult
from html_to_react.application.use_cases import (
    build_conversion_options,
    convert_html_file,
)


def convert_html_to_react(
    input_path: Path,
    output_dir: Path,
    component_name: str = DEFAULT_COMPONENT_NAME,
    drop_inline_styles: bool = False,
    install: bool = False,
    start: bool = False,
) -> ConversionResult:
    """Convert an HTML file into a React project under ``output_dir``."""
    options = build_conversion_options(
        component_name=component_name,
        drop_inline_styles=drop_inline_styles,
        install=install,
        start=start,
    )
    return convert_html_file(
        input_path=input_path,
        output_dir=output_dir,
        options=options,
    )
