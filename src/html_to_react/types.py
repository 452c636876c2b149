"""Shared type aliases for converter modules."""

from __future__ import annotations

type AttributeMap = dict[str, str]
type StyleMap = dict[str, str]
