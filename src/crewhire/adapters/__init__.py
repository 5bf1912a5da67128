"""Attribute tree adapters for job content documents."""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from .mapping import MappingNode
from .xml_tree import ElementNode


@runtime_checkable
class AttributeNode(Protocol):
    """Markup-agnostic, read-only view of one element in a content document.

    Attribute lookups are case-insensitive and return ``None`` when absent.
    """

    tag: str

    def get(self, name: str) -> str | None:
        """Return the raw attribute value, or ``None``."""

    def children(self, tag: str | None = None) -> Iterable["AttributeNode"]:
        """Yield child nodes in document order, optionally filtered by tag."""

    def first_child(self) -> "AttributeNode | None":
        """Return the first child node, if any."""


__all__ = ["AttributeNode", "ElementNode", "MappingNode"]
