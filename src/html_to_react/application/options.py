"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_COMPONENT_NAME = "ConvertedComponent"


@dataclass(frozen=True)
class ScaffoldOptions:
    """Post-conversion project steps."""

    install: bool = False
    start: bool = False


@dataclass(frozen=True)
class ConversionOptions:
    """Shared conversion options passed through use-cases."""

    component_name: str = DEFAULT_COMPONENT_NAME
    drop_inline_styles: bool = False
    scaffold: ScaffoldOptions = ScaffoldOptions()
