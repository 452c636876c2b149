"""Exception taxonomy for HTML-to-React conversion."""

from __future__ import annotations


class ConversionError(Exception):
    """Base error for conversion failures surfaced to callers."""

    exit_code = 1


class InvalidMarkupError(ConversionError):
    """Input is not a recognizable HTML document; nothing is generated."""

    exit_code = 2


class ParseError(ConversionError):
    """Markup could not be turned into a node tree."""


class SerializationError(ConversionError):
    """Node tree could not be rendered as JSX."""


class ScaffoldError(ConversionError):
    """Generated project files could not be written."""
