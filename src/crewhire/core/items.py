"""Parsing of job item sets into flat, per-variant requirement lists."""

from __future__ import annotations

from ..adapters import AttributeNode
from ..diagnostics import DiagnosticLog
from ..schemas.job import GameModeScope, ItemRequirement
from .attributes import attr_bool, attr_enum, attr_identifier, attr_int

ITEM_TAG = "Item"


def parse_item_set(
    node: AttributeNode,
    *,
    job_identifier: str = "",
    variant: int = 0,
    diagnostics: DiagnosticLog | None = None,
) -> tuple[ItemRequirement, ...]:
    """Flatten the ``Item`` tree under an item-set node.

    Each entry lands in one list in document order (parents before their
    children) with ``parent_index`` referring back into that list. Rejected
    entries are skipped but their children are still read, without a parent.
    """
    diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
    items: list[ItemRequirement] = []
    _collect(node, None, items, job_identifier, variant, diagnostics)
    return tuple(items)


def _collect(
    parent_node: AttributeNode,
    parent_index: int | None,
    items: list[ItemRequirement],
    job_identifier: str,
    variant: int,
    diagnostics: DiagnosticLog,
) -> None:
    parent = items[parent_index] if parent_index is not None else None
    for item_node in parent_node.children(ITEM_TAG):
        index: int | None = None
        if item_node.get("name") is not None:
            diagnostics.warn(
                "legacy_field_used",
                "job.item.legacy_name",
                "use identifiers instead of names to configure the items",
                job=job_identifier,
                variant=variant,
                name=item_node.get("name"),
            )
        elif not attr_identifier(item_node, "identifier"):
            diagnostics.warn(
                "missing_identifier",
                "job.item.missing_identifier",
                "item with no identifier",
                job=job_identifier,
                variant=variant,
            )
        else:
            items.append(build_item(item_node, parent, parent_index))
            index = len(items) - 1
        _collect(item_node, index, items, job_identifier, variant, diagnostics)


def build_item(
    node: AttributeNode,
    parent: ItemRequirement | None = None,
    parent_index: int | None = None,
) -> ItemRequirement:
    inherited = parent.game_mode if parent is not None else GameModeScope.ANY
    return ItemRequirement(
        item_id=attr_identifier(node, "identifier"),
        item_id_team2=attr_identifier(node, "identifierteam2"),
        amount=max(attr_int(node, "amount", 1), 0),
        infinite=attr_bool(node, "infinite", False),
        equip=attr_bool(node, "equip", False),
        outfit=attr_bool(node, "outfit", False),
        show_preview=attr_bool(node, "showpreview", True),
        game_mode=attr_enum(node, "gamemode", GameModeScope, inherited),
        parent_index=parent_index,
    )


__all__ = ["ITEM_TAG", "build_item", "parse_item_set"]
