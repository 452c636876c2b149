"""Build the node tree from sanitized markup via BeautifulSoup."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

from html_to_react.converter.nodes import Element, Node, Text
from html_to_react.errors import ParseError

_TAG_OPEN = re.compile(r"<(/?)([A-Za-z][^\s/<>]*)")
_TAG_BODY = re.compile(r"""(?:[^<>="']+|=\s*"[^"]*"|=\s*'[^']*'|=)*""")
_RAW_TEXT_TAGS = frozenset({"script", "style", "textarea", "title"})
_SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction, CData)


def find_unterminated_tag(markup: str) -> int | None:
    """Return the offset of the first tag missing its closing ``>``.

    Comments, declarations and the content of raw-text elements are skipped;
    an unclosed comment or raw-text element also counts as unterminated.
    A ``<`` that does not start a tag name is plain text.
    """
    pos = 0
    while True:
        start = markup.find("<", pos)
        if start == -1:
            return None
        if markup.startswith("<!--", start):
            end = markup.find("-->", start + 4)
            if end == -1:
                return start
            pos = end + 3
            continue
        if markup.startswith(("<!", "<?"), start):
            end = markup.find(">", start)
            if end == -1:
                return start
            pos = end + 1
            continue

        opening = _TAG_OPEN.match(markup, start)
        if opening is None:
            pos = start + 1
            continue
        body = _TAG_BODY.match(markup, opening.end())
        end = body.end() if body else opening.end()
        if end >= len(markup) or markup[end] != ">":
            return start
        pos = end + 1

        name = opening.group(2).lower()
        if not opening.group(1) and name in _RAW_TEXT_TAGS:
            closing = re.compile(rf"</{name}\s*>", re.IGNORECASE).search(markup, pos)
            if closing is None:
                return start
            pos = closing.end()


def _convert(tag: Tag) -> Element:
    children: list[Node] = []
    for child in tag.children:
        if isinstance(child, Tag):
            children.append(_convert(child))
        elif isinstance(child, NavigableString) and not isinstance(
            child, _SKIPPED_STRINGS
        ):
            children.append(Text(str(child)))
    attributes = {str(name): str(value) for name, value in tag.attrs.items()}
    return Element(tag=tag.name, attributes=attributes, children=children)


def _has_content(element: Element) -> bool:
    return any(
        isinstance(child, Element) or child.content.strip()
        for child in element.children
    )


def build(markup: str) -> Element:
    """Parse structural markup into a node tree rooted at ``<body>``.

    Parameters
    ----------
    markup : str
        Sanitized document markup.

    Returns
    -------
    Element
        The ``body`` element, or the ``html`` element without its ``head``
        when the document has no body.

    Raises
    ------
    ParseError
        If a tag is unterminated, the parser fails, or the body is empty.
    """
    offset = find_unterminated_tag(markup)
    if offset is not None:
        snippet = markup[offset : offset + 40].splitlines()[0]
        raise ParseError(f"Unterminated tag at offset {offset}: {snippet!r}")

    try:
        soup = BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)
        container = soup.body or soup.html
        if container is None:
            raise ParseError("No <html> or <body> element found")
        root = _convert(container)
    except ParseError:
        raise
    except Exception as exc:
        raise ParseError(f"Failed to parse HTML: {exc}") from exc

    if root.tag == "html":
        root.children = [
            child
            for child in root.children
            if not (isinstance(child, Element) and child.tag == "head")
        ]
    if not _has_content(root):
        raise ParseError("No content found in <body>")
    return root
