"""Wrap serialized JSX into a React component module."""

from __future__ import annotations

from html_to_react.converter.document import Document
from html_to_react.converter.nodes import FRAGMENT, Element
from html_to_react.converter.rewriter import rewrite
from html_to_react.converter.serializer import STYLES_BINDING, serialize
from html_to_react.converter.tree_builder import build
from html_to_react.errors import ConversionError, SerializationError

# JSX sits inside ``return (`` within the component body.
JSX_INDENT_LEVEL = 2


def styles_module_name(component_name: str) -> str:
    """File name of the CSS module generated next to a component."""
    return f"{component_name}.module.css"


def _component_root(body: Element) -> Element:
    content = [
        child
        for child in body.children
        if isinstance(child, Element) or child.content.strip()
    ]
    if len(content) == 1 and isinstance(content[0], Element):
        return content[0]
    return Element(tag=FRAGMENT, children=list(body.children))


def render_component(body: Element, component_name: str) -> str:
    """Render the content of a rewritten ``body`` as a component module.

    Raises
    ------
    SerializationError
        If the tree cannot be serialized.
    """
    jsx = serialize(_component_root(body), JSX_INDENT_LEVEL)
    styles_path = f"../styles/{styles_module_name(component_name)}"
    return (
        "import React from 'react';\n"
        f"import {STYLES_BINDING} from '{styles_path}';\n"
        "\n"
        f"const {component_name} = () => {{\n"
        "  return (\n"
        f"{jsx}\n"
        "  );\n"
        "};\n"
        "\n"
        f"export default {component_name};\n"
    )


def generate_component(document: Document, component_name: str) -> str:
    """Build, rewrite and render a sanitized document as component source.

    Raises
    ------
    ParseError
        If the markup cannot be turned into a tree.
    SerializationError
        If the tree cannot be rewritten or rendered.
    """
    body = build(document.markup)
    try:
        rewritten = rewrite(body)
        if not isinstance(rewritten, Element):
            raise SerializationError("Document root is not an element")
        return render_component(rewritten, component_name)
    except ConversionError:
        raise
    except Exception as exc:
        raise SerializationError(f"Component generation failed: {exc!r}") from exc
