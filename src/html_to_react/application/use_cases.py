"""Application use-cases orchestrating conversion workflows."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from html_to_react.adapters.loaders import FileDocumentLoader
from html_to_react.adapters.npm import NpmPackageManager
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
from html_to_react.converter.component import generate_component
from html_to_react.converter.document import sanitize
from html_to_react.converter.fallback import emit_fallback
from html_to_react.errors import (
    ConversionError,
    ParseError,
    ScaffoldError,
    SerializationError,
)
from html_to_react.infrastructure.scaffolding import ProjectScaffolder
from html_to_react.schemas import ConversionConfig

logger = logging.getLogger(__name__)


def convert_html_file(
    *,
    input_path: Path,
    output_dir: Path,
    options: ConversionOptions,
    loader: DocumentLoader | None = None,
    writer: ProjectWriter | None = None,
    package_manager: PackageManager | None = None,
) -> ConversionResult:
    """Use-case: convert an HTML document into a React project.

    A document that loads always yields a component file: tree building and
    serialization failures are answered with the fallback component.

    Raises
    ------
    InvalidMarkupError
        If the input is not an HTML document; nothing is written.
    ConversionError
        If options are invalid.
    ScaffoldError
        If project files cannot be written.
    """
    try:
        config = ConversionConfig(
            input_path=input_path,
            output_dir=output_dir,
            component_name=options.component_name,
            drop_inline_styles=options.drop_inline_styles,
        )
    except ValidationError as exc:
        raise ConversionError(f"Invalid conversion parameters: {exc}") from exc

    loader = loader or FileDocumentLoader()
    writer = writer or ProjectScaffolder()
    package_manager = package_manager or NpmPackageManager()

    logger.info("Starting conversion of %s", config.input_path)
    loaded = loader.load(config.input_path)
    try:
        document = sanitize(loaded, drop_inline_styles=config.drop_inline_styles)
    except Exception as exc:
        logger.warning(
            "Sanitization failed (%s); continuing with unsanitized markup", exc
        )
        document = loaded

    fallback_reason: str | None = None
    try:
        component_source = generate_component(document, config.component_name)
    except (ParseError, SerializationError) as exc:
        fallback_reason = str(exc)
        logger.warning(
            "Component generation failed (%s); writing fallback component",
            fallback_reason,
        )
        component_source = emit_fallback(document, config.component_name)

    try:
        written = writer.write(
            config.output_dir,
            document,
            config.component_name,
            component_source,
        )
    except OSError as exc:
        raise ScaffoldError(
            f"Failed to write project to {config.output_dir}: {exc}"
        ) from exc
    for path in written:
        logger.info("Created %s", path)

    installed: bool | None = None
    if options.scaffold.install:
        installed = package_manager.install(config.output_dir)
    if options.scaffold.start:
        package_manager.start(config.output_dir)

    return ConversionResult(
        output_dir=config.output_dir,
        component_path=written[0],
        source_path=config.input_path,
        written=written,
        fallback_used=fallback_reason is not None,
        fallback_reason=fallback_reason,
        assets=document.assets,
        installed=installed,
    )


def build_conversion_options(
    *,
    component_name: str = DEFAULT_COMPONENT_NAME,
    drop_inline_styles: bool = False,
    install: bool = False,
    start: bool = False,
) -> ConversionOptions:
    """Build typed option object from command/API params."""
    return ConversionOptions(
        component_name=component_name,
        drop_inline_styles=drop_inline_styles,
        scaffold=ScaffoldOptions(install=install, start=start),
    )
