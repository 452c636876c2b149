"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from html_to_react.converter.document import Document


class DocumentLoader(Protocol):
    """Read an HTML document from disk."""

    def load(self, path: Path) -> Document:
        """Load document; raise ``InvalidMarkupError`` when unusable."""


class ProjectWriter(Protocol):
    """Materialize the generated React project."""

    def write(
        self,
        output_dir: Path,
        document: Document,
        component_name: str,
        component_source: str,
    ) -> tuple[Path, ...]:
        """Write project files and return every path written, in order."""


class PackageManager(Protocol):
    """Install dependencies and run the generated project."""

    def install(self, project_dir: Path) -> bool:
        """Install dependencies; return ``False`` on failure."""

    def start(self, project_dir: Path) -> bool:
        """Run the dev server; return ``False`` on failure."""
