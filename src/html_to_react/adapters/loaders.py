"""Document loaders implementing the application port."""

from __future__ import annotations

from pathlib import Path

from html_to_react.converter.document import Document, load


class FileDocumentLoader:
    """Load an HTML document from the local filesystem."""

    def load(self, path: Path) -> Document:
        """Read and check an HTML file.

        Parameters
        ----------
        path : Path
            HTML file path.

        Returns
        -------
        Document
            Loaded, unsanitized document.

        Raises
        ------
        InvalidMarkupError
            If the file is unreadable or has no ``<html`` marker.
        """
        return load(path)
