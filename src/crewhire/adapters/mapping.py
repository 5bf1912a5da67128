"""Mapping-backed attribute nodes for YAML or JSON content.

A node is a single-key mapping ``{Tag: body}``. The body holds attributes as
scalar values and child nodes as a list under ``children``::

    Job:
      identifier: mechanic
      children:
        - ItemSet:
            children:
              - Item: {identifier: wrench, equip: true}
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping

CHILDREN_KEY = "children"


class MappingNode:
    """Wrap a ``{tag: body}`` mapping; the whole subtree is validated up front."""

    def __init__(self, tag: str, body: Mapping[str, Any] | None = None) -> None:
        self._tag = tag
        body = body or {}
        self._attributes = {
            str(key).lower(): _stringify(value)
            for key, value in body.items()
            if key != CHILDREN_KEY and value is not None
        }
        raw_children = body.get(CHILDREN_KEY) or []
        if not isinstance(raw_children, (list, tuple)):
            raise ValueError(f"{CHILDREN_KEY!r} of node {tag!r} must be a list")
        self._children = [MappingNode.from_mapping(raw) for raw in raw_children]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MappingNode":
        if not isinstance(data, Mapping) or len(data) != 1:
            raise ValueError("A content node must be a mapping with exactly one tag key")
        ((tag, body),) = data.items()
        if body is not None and not isinstance(body, Mapping):
            raise ValueError(f"Body of node {tag!r} must be a mapping")
        return cls(str(tag), body)

    @property
    def tag(self) -> str:
        return self._tag

    def get(self, name: str) -> str | None:
        return self._attributes.get(name.lower())

    def children(self, tag: str | None = None) -> Iterator["MappingNode"]:
        wanted = tag.lower() if tag else None
        for child in self._children:
            if wanted is None or child.tag.lower() == wanted:
                yield child

    def first_child(self) -> "MappingNode | None":
        return next(iter(self.children()), None)

    def __repr__(self) -> str:
        return f"<{self.tag} {self._attributes}>"


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)
