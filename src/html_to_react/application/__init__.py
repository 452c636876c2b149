"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from html_to_react.application.options import (
    DEFAULT_COMPONENT_NAME,
    ConversionOptions,
    ScaffoldOptions,
)
from html_to_react.application.ports import (
    DocumentLoader,
    PackageManager,
    ProjectWriter,
)
from html_to_react.application.results import ConversionResult


def build_conversion_options(
    *,
    component_name: str = DEFAULT_COMPONENT_NAME,
    drop_inline_styles: bool = False,
    install: bool = False,
    start: bool = False,
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from html_to_react.application.use_cases import build_conversion_options as _impl

    return _impl(
        component_name=component_name,
        drop_inline_styles=drop_inline_styles,
        install=install,
        start=start,
    )


def convert_html_file(
    *,
    input_path: Path,
    output_dir: Path,
    options: ConversionOptions,
    loader: DocumentLoader | None = None,
    writer: ProjectWriter | None = None,
    package_manager: PackageManager | None = None,
) -> ConversionResult:
    """Convert an HTML document via lazy use-case import."""
    from html_to_react.application.use_cases import convert_html_file as _impl

    return _impl(
        input_path=input_path,
        output_dir=output_dir,
        options=options,
        loader=loader,
        writer=writer,
        package_manager=package_manager,
    )


__all__ = [
    "ConversionOptions",
    "ScaffoldOptions",
    "ConversionResult",
    "build_conversion_options",
    "convert_html_file",
]
