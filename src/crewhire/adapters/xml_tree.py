"""XML-backed attribute nodes."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator


class ElementNode:
    """Wrap an :class:`xml.etree.ElementTree.Element`."""

    def __init__(self, element: ET.Element) -> None:
        self._element = element
        self._attributes = {key.lower(): value for key, value in element.attrib.items()}

    @classmethod
    def from_string(cls, text: str) -> "ElementNode":
        return cls(ET.fromstring(text))

    @classmethod
    def from_path(cls, path: Path) -> "ElementNode":
        return cls(ET.parse(path).getroot())

    @property
    def tag(self) -> str:
        return self._element.tag

    def get(self, name: str) -> str | None:
        return self._attributes.get(name.lower())

    def children(self, tag: str | None = None) -> Iterator["ElementNode"]:
        wanted = tag.lower() if tag else None
        for child in self._element:
            if not isinstance(child.tag, str):
                # comments and processing instructions
                continue
            if wanted is None or child.tag.lower() == wanted:
                yield ElementNode(child)

    def first_child(self) -> "ElementNode | None":
        return next(iter(self.children()), None)

    def __repr__(self) -> str:
        return f"<{self.tag} {self._attributes}>"
