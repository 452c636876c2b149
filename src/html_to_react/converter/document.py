"""Document loading and sanitization."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from pathlib import Path

from bs4 import BeautifulSoup

from html_to_react.errors import InvalidMarkupError

logger = logging.getLogger(__name__)

_ROOT_MARKER = re.compile(r"<html\b", re.IGNORECASE)
_STYLE_BLOCK = re.compile(
    r"<style(?=[\s/>])[^>]*>.*?</style\s*>", re.IGNORECASE | re.DOTALL
)
_START_TAG = re.compile(r"<[A-Za-z][^\s/>]*(?:[^<>\"']|\"[^\"]*\"|'[^']*')*>")
_INLINE_STYLE = re.compile(
    r"""\s+style\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'>]+)""", re.IGNORECASE
)
_ASSET_SELECTOR = 'img, link[rel="stylesheet"], script[src]'


@dataclass(frozen=True)
class Document:
    """One input document and the fields derived from it.

    Parameters
    ----------
    source_path : Path
        Where the document was read from.
    raw : str
        Input text exactly as read.
    markup : str
        Structural content handed to the tree builder.
    styles : str
        Concatenated ``<style>`` block contents, newline-terminated.
    assets : tuple[str, ...]
        Referenced asset paths in order of first occurrence.
    title : str | None
        Text of the ``<title>`` element when present.
    """

    source_path: Path
    raw: str
    markup: str
    styles: str = ""
    assets: tuple[str, ...] = ()
    title: str | None = None


def parse_document(raw: str, source_path: Path) -> Document:
    """Wrap raw text into a ``Document`` after checking for the root marker.

    Raises
    ------
    InvalidMarkupError
        If no ``<html`` marker is present.
    """
    if not _ROOT_MARKER.search(raw):
        raise InvalidMarkupError(
            f"Invalid HTML: missing <html> tag in {source_path.name}"
        )
    return Document(source_path=source_path, raw=raw, markup=raw)


def load(path: Path) -> Document:
    """Read an HTML file into a ``Document``.

    Parameters
    ----------
    path : Path
        HTML file to read (UTF-8).

    Returns
    -------
    Document
        Unsanitized document whose ``markup`` equals its raw text.

    Raises
    ------
    InvalidMarkupError
        If the file cannot be read or lacks an ``<html`` root marker.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidMarkupError(f"Failed to read HTML from {path}: {exc}") from exc
    document = parse_document(raw, path)
    logger.info("Read HTML file: %s", path.name)
    return document


def _strip_inline_styles(markup: str) -> str:
    return _START_TAG.sub(lambda match: _INLINE_STYLE.sub("", match.group(0)), markup)


def sanitize(document: Document, *, drop_inline_styles: bool = False) -> Document:
    """Separate style rules and asset references from structural content.

    Parameters
    ----------
    document : Document
        Loaded document; left untouched.
    drop_inline_styles : bool, default=False
        Remove every inline ``style`` attribute instead of leaving it for the
        attribute rewriter to translate.

    Returns
    -------
    Document
        New document with ``styles``, ``assets`` and ``title`` filled and
        ``<style>`` blocks removed from ``markup``.

    Notes
    -----
    Reading goes through BeautifulSoup; removal edits the markup text so the
    tree builder still sees malformed tags exactly as written.
    """
    soup = BeautifulSoup(document.markup, "html.parser")

    styles = "".join(f"{block.string or ''}\n" for block in soup.find_all("style"))

    assets: list[str] = []
    for element in soup.select(_ASSET_SELECTOR):
        reference = element.get("src") or element.get("href")
        if reference:
            assets.append(str(reference))

    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if title_tag is not None else None

    markup = _STYLE_BLOCK.sub("", document.markup)
    if drop_inline_styles:
        markup = _strip_inline_styles(markup)

    logger.debug(
        "Sanitized %s: %d style bytes, %d assets",
        document.source_path.name,
        len(styles),
        len(assets),
    )
    return replace(
        document,
        markup=markup,
        styles=styles,
        assets=tuple(assets),
        title=title or None,
    )
