"""In-memory node tree and typed prop values."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum

from html_to_react.types import AttributeMap

FRAGMENT = ""


class PropKind(StrEnum):
    """Discriminator for rewritten prop values."""

    STRING = "string"
    BOOLEAN = "boolean"
    STYLE = "style"
    CLASS_REF = "class_ref"


@dataclass(frozen=True)
class PropValue:
    """Tagged prop value; only the payload matching ``kind`` is meaningful.

    Parameters
    ----------
    kind : PropKind
        Which payload the value carries.
    text : str, default=""
        Payload for ``STRING`` props.
    style : tuple[tuple[str, str], ...], default=()
        Ordered ``(camelKey, value)`` pairs for ``STYLE`` props.
    classes : tuple[str, ...], default=()
        Ordered CSS-module keys for ``CLASS_REF`` props.
    """

    kind: PropKind
    text: str = ""
    style: tuple[tuple[str, str], ...] = ()
    classes: tuple[str, ...] = ()

    @classmethod
    def string(cls, value: str) -> PropValue:
        return cls(kind=PropKind.STRING, text=value)

    @classmethod
    def boolean(cls) -> PropValue:
        return cls(kind=PropKind.BOOLEAN)

    @classmethod
    def style_map(cls, mapping: Mapping[str, str]) -> PropValue:
        return cls(kind=PropKind.STYLE, style=tuple(mapping.items()))

    @classmethod
    def class_ref(cls, keys: Iterable[str]) -> PropValue:
        return cls(kind=PropKind.CLASS_REF, classes=tuple(keys))


@dataclass
class Text:
    """Text leaf."""

    content: str


@dataclass
class Element:
    """Element node owning its children.

    ``props`` stays ``None`` until the attribute rewriter has run.
    """

    tag: str
    attributes: AttributeMap = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    props: dict[str, PropValue] | None = None

    @property
    def is_fragment(self) -> bool:
        return self.tag == FRAGMENT


type Node = Element | Text
