"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConversionResult:
    """Structured conversion outcome."""

    output_dir: Path
    component_path: Path
    source_path: Path
    written: tuple[Path, ...]
    fallback_used: bool = False
    fallback_reason: str | None = None
    assets: tuple[str, ...] = ()
    installed: bool | None = None
