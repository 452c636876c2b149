"""Rewrite HTML attributes into React props."""

from __future__ import annotations

import re
from collections.abc import Mapping

from html_to_react.converter.nodes import Element, Node, PropValue, Text
from html_to_react.types import StyleMap

CLASS_PROP = "className"
STYLE_PROP = "style"

# Attributes whose presence alone means "true"; html.parser reports a
# value-less attribute as an empty string.
BOOLEAN_ATTRIBUTES = frozenset(
    {
        "allowfullscreen",
        "async",
        "autofocus",
        "autoplay",
        "checked",
        "controls",
        "default",
        "defer",
        "disabled",
        "formnovalidate",
        "hidden",
        "inert",
        "ismap",
        "itemscope",
        "loop",
        "multiple",
        "muted",
        "nomodule",
        "novalidate",
        "open",
        "playsinline",
        "readonly",
        "required",
        "reversed",
        "selected",
    }
)

_HYPHEN_LETTER = re.compile(r"-([a-z])")


def camel_case(prop: str) -> str:
    """Convert a kebab-case CSS property name to camelCase."""
    return _HYPHEN_LETTER.sub(lambda match: match.group(1).upper(), prop.lower())


def parse_style(value: str) -> StyleMap:
    """Parse an inline style string into a camelCase keyed map.

    Malformed declarations (no colon, empty property or empty value) are
    dropped. Later declarations override earlier ones.
    """
    styles: StyleMap = {}
    for rule in value.split(";"):
        prop, sep, val = rule.partition(":")
        prop, val = prop.strip(), val.strip()
        if not sep or not prop or not val:
            continue
        styles[camel_case(prop)] = val
    return styles


def is_boolean_attribute(name: str, value: str) -> bool:
    """Check whether an attribute is written in boolean form."""
    lowered = name.lower()
    return value.lower() == lowered or (value == "" and lowered in BOOLEAN_ATTRIBUTES)


def rewrite_attributes(attributes: Mapping[str, str]) -> dict[str, PropValue]:
    """Map raw HTML attributes to typed React props.

    Parameters
    ----------
    attributes : Mapping[str, str]
        Attribute names and raw values as parsed.

    Returns
    -------
    dict[str, PropValue]
        ``className`` first when ``class`` is present, ``style`` next, then
        every other attribute in encounter order.
    """
    props: dict[str, PropValue] = {}
    if "class" in attributes:
        props[CLASS_PROP] = PropValue.class_ref(attributes["class"].split())
    if "style" in attributes:
        props[STYLE_PROP] = PropValue.style_map(parse_style(attributes["style"]))
    for name, value in attributes.items():
        if name in ("class", "style"):
            continue
        if is_boolean_attribute(name, value):
            props[name] = PropValue.boolean()
        else:
            props[name] = PropValue.string(value)
    return props


def rewrite(node: Node) -> Node:
    """Return a copy of ``node`` with props filled on every element.

    The tree shape is unchanged; raw attributes are carried over as-is.
    """
    if isinstance(node, Text):
        return Text(node.content)
    return Element(
        tag=node.tag,
        attributes=dict(node.attributes),
        children=[rewrite(child) for child in node.children],
        props=rewrite_attributes(node.attributes),
    )
