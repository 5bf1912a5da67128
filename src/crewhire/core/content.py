"""Loading of job content documents into a registry."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import structlog
import yaml

from ..adapters import AttributeNode, ElementNode, MappingNode
from ..diagnostics import DiagnosticLog
from ..schemas.job import RepairPriority
from .attributes import attr_float, attr_identifier
from .contracts import SpriteLoader
from .jobs import JobDefinition
from .registry import JobRegistry


class ContentFormatError(ValueError):
    """Raised when a content file cannot be read as an attribute tree at all."""


class JobContentLoader:
    """Read ``Jobs`` documents (XML or YAML) into a :class:`JobRegistry`.

    Bad entries are reported through :attr:`diagnostics` and skipped.
    """

    def __init__(
        self,
        *,
        sprite_loader: SpriteLoader | None = None,
        diagnostics: DiagnosticLog | None = None,
    ) -> None:
        self._sprite_loader = sprite_loader
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self._logger = structlog.get_logger(__name__)

    def load_path(self, path: Path, registry: JobRegistry | None = None) -> JobRegistry:
        return self.load_node(read_content_file(path), registry)

    def load_paths(self, paths: list[Path], registry: JobRegistry | None = None) -> JobRegistry:
        registry = registry if registry is not None else JobRegistry()
        for path in paths:
            self.load_path(path, registry)
        return registry

    def load_node(self, root: AttributeNode, registry: JobRegistry | None = None) -> JobRegistry:
        registry = registry if registry is not None else JobRegistry()
        before = len(registry)
        self._load_element(root, registry)
        self._logger.info(
            "content.loaded",
            root=root.tag,
            jobs=len(registry) - before,
            diagnostics=len(self.diagnostics),
        )
        return registry

    def _load_element(self, node: AttributeNode, registry: JobRegistry) -> None:
        tag = node.tag.lower()
        if tag in ("jobs", "override"):
            for child in node.children():
                self._load_element(child, registry)
        elif tag == "job":
            self._load_job(node, registry)
        elif tag == "itemrepairpriorities":
            for child in node.children():
                registry.add_repair_priority(self._load_repair_priority(child))
        else:
            self._logger.debug("content.ignored", tag=node.tag)

    def _load_job(self, node: AttributeNode, registry: JobRegistry) -> None:
        if not attr_identifier(node, "identifier"):
            self.diagnostics.warn(
                "missing_identifier",
                "job.missing_identifier",
                "job definition with no identifier",
            )
            return
        registry.add(
            JobDefinition.from_node(
                node,
                sprite_loader=self._sprite_loader,
                diagnostics=self.diagnostics,
            )
        )

    def _load_repair_priority(self, node: AttributeNode) -> RepairPriority:
        priority = RepairPriority(
            tag=attr_identifier(node, "tag"),
            priority=attr_float(node, "priority", -1.0),
        )
        if priority.priority < 0:
            self.diagnostics.warn(
                "invalid_priority",
                "repair_priority.invalid",
                "the 'priority' attribute is missing or negative",
                tag=priority.tag,
            )
        return priority


def read_content_file(path: Path) -> AttributeNode:
    """Open an XML or YAML content file as an attribute tree."""
    suffix = path.suffix.lower()
    if suffix == ".xml":
        try:
            return ElementNode.from_path(path)
        except ET.ParseError as exc:
            raise ContentFormatError(f"Invalid XML in {path}: {exc}") from exc
    if suffix in (".yaml", ".yml"):
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = yaml.safe_load(handle)
            except yaml.YAMLError as exc:
                raise ContentFormatError(f"Invalid YAML in {path}: {exc}") from exc
        try:
            return MappingNode.from_mapping(data)
        except ValueError as exc:
            raise ContentFormatError(f"Invalid content structure in {path}: {exc}") from exc
    raise ContentFormatError(f"Unsupported content file type: {path.suffix!r}")


__all__ = ["ContentFormatError", "JobContentLoader", "read_content_file"]
