"""Serialize a rewritten node tree into indented JSX."""

from __future__ import annotations

import json
import re

from html_to_react.converter.nodes import Node, PropKind, PropValue, Text
from html_to_react.converter.rewriter import (
    CLASS_PROP,
    STYLE_PROP,
    rewrite_attributes,
)
from html_to_react.errors import SerializationError

INDENT_STEP = 2
STYLES_BINDING = "styles"

# Elements whose text renders with its whitespace intact.
PRESERVE_WHITESPACE_TAGS = frozenset(
    {"listing", "plaintext", "pre", "script", "style", "textarea", "xmp"}
)

# Phrasing elements: a line break between two of them renders as a space.
INLINE_TAGS = frozenset(
    {
        "a",
        "abbr",
        "b",
        "bdi",
        "bdo",
        "br",
        "button",
        "cite",
        "code",
        "data",
        "del",
        "dfn",
        "em",
        "i",
        "img",
        "input",
        "ins",
        "kbd",
        "label",
        "mark",
        "output",
        "q",
        "s",
        "samp",
        "select",
        "small",
        "span",
        "strong",
        "sub",
        "sup",
        "textarea",
        "time",
        "u",
        "var",
        "wbr",
    }
)

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_JSX_ATTRIBUTE_NAME = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$-]*$")
_JSX_RESERVED = re.compile(r"[{}<>&]")
_JSX_ESCAPES = {
    "{": "{'{'}",
    "}": "{'}'}",
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
}
_ATTRIBUTE_NEEDS_EXPRESSION = re.compile(r"[\"&\r\n]")


def _js_string(value: str) -> str:
    """Single-quoted JavaScript string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


def _class_lookup(key: str) -> str:
    if _IDENTIFIER.match(key):
        return f"{STYLES_BINDING}.{key}"
    return f"{STYLES_BINDING}[{_js_string(key)}]"


def _prop_expression(name: str, value: PropValue) -> str:
    """JavaScript expression for a prop value."""
    match value.kind:
        case PropKind.CLASS_REF:
            lookups = [_class_lookup(key) for key in value.classes]
            if not lookups:
                return '""'
            if len(lookups) == 1:
                return lookups[0]
            template = " ".join(f"${{{lookup}}}" for lookup in lookups)
            return f"`{template}`"
        case PropKind.STYLE:
            if not value.style:
                return "{}"
            entries = ", ".join(
                f"{key if _IDENTIFIER.match(key) else _js_string(key)}: "
                f"{_js_string(val)}"
                for key, val in value.style
            )
            return f"{{ {entries} }}"
        case PropKind.BOOLEAN:
            return "true"
        case PropKind.STRING:
            return json.dumps(value.text)
    raise SerializationError(f"Unknown prop kind for {name!r}: {value.kind!r}")


def render_prop(name: str, value: PropValue) -> str:
    """Render one prop as JSX attribute text.

    Names JSX cannot spell as an attribute (``@click``, ``xlink:href``) are
    kept verbatim through an object spread.
    """
    expression = _prop_expression(name, value)
    if not _JSX_ATTRIBUTE_NAME.match(name):
        return f"{{...{{{json.dumps(name)}: {expression}}}}}"
    if value.kind is PropKind.BOOLEAN:
        return name
    if value.kind is PropKind.STRING and not _ATTRIBUTE_NEEDS_EXPRESSION.search(
        value.text
    ):
        return f'{name}="{value.text}"'
    if value.kind is PropKind.CLASS_REF and not value.classes:
        return f'{name}=""'
    return f"{name}={{{expression}}}"


def _ordered_props(props: dict[str, PropValue]) -> list[tuple[str, PropValue]]:
    leading = [name for name in (CLASS_PROP, STYLE_PROP) if name in props]
    rest = [name for name in props if name not in leading]
    return [(name, props[name]) for name in leading + rest]


def escape_text(text: str) -> str:
    """Neutralize characters JSX would read as syntax inside text."""
    return _JSX_RESERVED.sub(lambda match: _JSX_ESCAPES[match.group(0)], text)


def _is_inline(node: Node | None) -> bool:
    if node is None:
        return False
    if isinstance(node, Text):
        return bool(node.content.strip())
    return node.tag in INLINE_TAGS


def _text_line(
    content: str, *, preserve: bool = False, between_inline: bool = False
) -> str | None:
    """JSX for one text node, or ``None`` when it renders nothing.

    Text JSX would trim or join differently is written as a string
    expression holding the content verbatim.
    """
    if not content:
        return None
    has_break = "\n" in content or "\r" in content
    if not content.strip() and has_break and not preserve:
        # A line break between two inline siblings is a rendered space.
        return '{" "}' if between_inline else None
    if has_break or content != content.strip():
        return f"{{{json.dumps(content)}}}"
    return escape_text(content)


def _serialize_lines(node: Node, level: int, preserve: bool = False) -> list[str]:
    pad = " " * (INDENT_STEP * level)
    if isinstance(node, Text):
        line = _text_line(node.content, preserve=preserve)
        return [] if line is None else [pad + line]

    preserve = preserve or node.tag in PRESERVE_WHITESPACE_TAGS
    child_pad = " " * (INDENT_STEP * (level + 1))
    child_lines: list[str] = []
    for index, child in enumerate(node.children):
        if isinstance(child, Text):
            previous = node.children[index - 1] if index > 0 else None
            following = (
                node.children[index + 1] if index + 1 < len(node.children) else None
            )
            line = _text_line(
                child.content,
                preserve=preserve,
                between_inline=_is_inline(previous) and _is_inline(following),
            )
            if line is not None:
                child_lines.append(child_pad + line)
        else:
            child_lines.extend(_serialize_lines(child, level + 1, preserve))

    if node.is_fragment:
        if not child_lines:
            return [f"{pad}<></>"]
        return [f"{pad}<>", *child_lines, f"{pad}</>"]

    props = node.props
    if props is None:
        props = rewrite_attributes(node.attributes)
    rendered = " ".join(
        render_prop(name, value) for name, value in _ordered_props(props)
    )
    opening = f"{node.tag} {rendered}" if rendered else node.tag

    if not child_lines:
        return [f"{pad}<{opening} />"]
    return [f"{pad}<{opening}>", *child_lines, f"{pad}</{node.tag}>"]


def serialize(node: Node, indent_level: int = 0) -> str:
    """Render a node tree as JSX source.

    Parameters
    ----------
    node : Node
        Root of a rewritten tree. Elements without props are rewritten on
        the fly.
    indent_level : int, default=0
        Nesting level of ``node``; each level indents by ``INDENT_STEP``.

    Returns
    -------
    str
        Newline-joined JSX lines without a trailing newline.

    Raises
    ------
    SerializationError
        If any part of the tree cannot be rendered. Nothing partial is
        returned.

    Notes
    -----
    Text keeps its whitespace: content JSX would trim is emitted as a string
    expression. Whitespace-only runs containing a line break are layout and
    dropped, except between two inline siblings where they render as
    ``{" "}`` and inside whitespace-preserving elements such as ``<pre>``.
    """
    try:
        return "\n".join(_serialize_lines(node, indent_level))
    except SerializationError:
        raise
    except Exception as exc:
        raise SerializationError(f"Failed to serialize node tree: {exc!r}") from exc
