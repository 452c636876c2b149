"""Conversion core: load, build, rewrite, serialize, fall back."""

from __future__ import annotations

from html_to_react.converter.component import generate_component, render_component
from html_to_react.converter.document import Document, load, sanitize
from html_to_react.converter.fallback import FALLBACK_WARNING, emit_fallback
from html_to_react.converter.nodes import Element, Node, PropKind, PropValue, Text
from html_to_react.converter.rewriter import rewrite, rewrite_attributes
from html_to_react.converter.serializer import serialize
from html_to_react.converter.tree_builder import build

__all__ = [
    "Document",
    "Element",
    "FALLBACK_WARNING",
    "Node",
    "PropKind",
    "PropValue",
    "Text",
    "build",
    "emit_fallback",
    "generate_component",
    "load",
    "render_component",
    "rewrite",
    "rewrite_attributes",
    "sanitize",
    "serialize",
]
