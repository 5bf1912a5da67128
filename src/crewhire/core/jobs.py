"""Job definitions parsed from content documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping

from ..adapters import AttributeNode
from ..diagnostics import DiagnosticLog
from ..schemas.job import (
    AutonomousObjective,
    IdleBehavior,
    ItemRequirement,
    JobTunables,
    LevelRange,
    Skill,
    SpriteReference,
)
from .attributes import (
    attr_bool,
    attr_enum,
    attr_float,
    attr_identifier,
    attr_int,
    attr_range,
    attr_str,
    parse_color,
)
from .contracts import SpriteLoader, TextLookup
from .items import parse_item_set

ItemPredicate = Callable[[ItemRequirement], bool]

_DEFAULT_TUNABLES = JobTunables()


class ReferenceSpriteLoader:
    """Sprite loader that only records where the icon would come from."""

    def load(self, node: AttributeNode) -> SpriteReference:
        rect = attr_str(node, "sourcerect")
        try:
            source_rect = tuple(int(part) for part in rect.split(",")) if rect else ()
        except ValueError:
            source_rect = ()
        return SpriteReference(
            texture=attr_str(node, "texture"),
            source_rect=source_rect,
            attributes={
                key: value
                for key in ("origin", "depth")
                if (value := node.get(key)) is not None
            },
        )


def parse_tunables(node: AttributeNode) -> JobTunables:
    defaults = _DEFAULT_TUNABLES
    return JobTunables(
        ui_color=parse_color(node.get("uicolor"), defaults.ui_color),
        idle_behavior=attr_enum(node, "idlebehavior", IdleBehavior, defaults.idle_behavior),
        only_job_specific_dialog=attr_bool(
            node, "onlyjobspecificdialog", defaults.only_job_specific_dialog
        ),
        initial_count=attr_int(node, "initialcount", defaults.initial_count),
        campaign_setup_order=attr_int(node, "campaignsetupuiorder", defaults.campaign_setup_order),
        allow_always=attr_bool(node, "allowalways", defaults.allow_always),
        max_number=attr_int(node, "maxnumber", defaults.max_number),
        min_number=attr_int(node, "minnumber", defaults.min_number),
        min_karma=attr_float(node, "minkarma", defaults.min_karma),
        price_multiplier=attr_float(node, "pricemultiplier", defaults.price_multiplier),
        vitality_modifier=attr_float(node, "vitalitymodifier", defaults.vitality_modifier),
        hidden_job=attr_bool(node, "hiddenjob", defaults.hidden_job),
    )


def parse_skill(node: AttributeNode) -> Skill:
    start, end = attr_range(node, "level")
    level_range = LevelRange(start=start, end=end)
    pvp_range = None
    if node.get("pvplevel") is not None:
        pvp_start, pvp_end = attr_range(node, "pvplevel", (start, end))
        pvp_range = LevelRange(start=pvp_start, end=pvp_end)
    return Skill(
        identifier=attr_identifier(node, "identifier"),
        level_range=level_range,
        pvp_level_range=pvp_range,
        is_primary=attr_bool(node, "primary", False),
        price_multiplier=attr_float(node, "pricemultiplier", 25.0),
    )


def parse_autonomous_objective(node: AttributeNode) -> AutonomousObjective:
    identifier = attr_identifier(node, "identifier")
    if not identifier:
        identifier = attr_identifier(node, "aitag")
    return AutonomousObjective(
        identifier=identifier,
        option=attr_identifier(node, "option"),
        priority_modifier=max(attr_float(node, "prioritymodifier", 1.0), 0.0),
        ignore_at_outpost=attr_bool(node, "ignoreatoutpost", False),
        ignore_at_non_outpost=attr_bool(node, "ignoreatnonoutpost", False),
    )


def sort_skills(skills: list[Skill] | tuple[Skill, ...]) -> tuple[Skill, ...]:
    """Order skills by the start of their non-PvP level range, highest first."""
    return tuple(sorted(skills, key=lambda skill: skill.level_range_for(False).start, reverse=True))


@dataclass(frozen=True, slots=True, eq=False)
class JobDefinition:
    """Immutable job definition.

    ``job_items`` maps a variant index to that variant's flat requirement list.
    :meth:`get_job_items` and :meth:`has_job_item` do not filter by team or
    game mode; use :meth:`ItemRequirement.resolve_identifier` for that.
    """

    identifier: str
    tunables: JobTunables = field(default_factory=JobTunables)
    skills: tuple[Skill, ...] = ()
    autonomous_objectives: tuple[AutonomousObjective, ...] = ()
    appropriate_orders: tuple[str, ...] = ()
    job_items: Mapping[int, tuple[ItemRequirement, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    variants: int = 0
    icon: Any = None
    icon_small: Any = None

    @classmethod
    def from_node(
        cls,
        node: AttributeNode,
        *,
        sprite_loader: SpriteLoader | None = None,
        diagnostics: DiagnosticLog | None = None,
    ) -> "JobDefinition":
        diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        sprite_loader = sprite_loader or ReferenceSpriteLoader()
        identifier = attr_identifier(node, "identifier")

        job_items: dict[int, tuple[ItemRequirement, ...]] = {}
        skills: list[Skill] = []
        objectives: list[AutonomousObjective] = []
        orders: list[str] = []
        icon = icon_small = None
        variant = 0

        for child in node.children():
            tag = child.tag.lower()
            if tag == "itemset":
                job_items[variant] = parse_item_set(
                    child,
                    job_identifier=identifier,
                    variant=variant,
                    diagnostics=diagnostics,
                )
                variant += 1
            elif tag == "skills":
                skills.extend(parse_skill(skill_node) for skill_node in child.children())
            elif tag == "autonomousobjectives":
                objectives.extend(
                    parse_autonomous_objective(objective) for objective in child.children()
                )
            elif tag in ("appropriateobjectives", "appropriateorders"):
                orders.extend(attr_identifier(order, "identifier") for order in child.children())
            elif tag == "jobicon":
                icon = _load_icon(child, sprite_loader)
            elif tag == "jobiconsmall":
                icon_small = _load_icon(child, sprite_loader)

        return cls(
            identifier=identifier,
            tunables=parse_tunables(node),
            skills=sort_skills(skills),
            autonomous_objectives=tuple(objectives),
            appropriate_orders=tuple(orders),
            job_items=MappingProxyType(job_items),
            variants=variant,
            icon=icon,
            icon_small=icon_small,
        )

    @property
    def name_key(self) -> str:
        return f"JobName.{self.identifier}"

    @property
    def description_key(self) -> str:
        return f"JobDescription.{self.identifier}"

    def display_name(self, text: TextLookup) -> str:
        return text.get(self.name_key) or self.identifier

    def display_description(self, text: TextLookup) -> str:
        return text.get(self.description_key) or ""

    @property
    def hidden(self) -> bool:
        return self.tunables.hidden_job

    @property
    def price_multiplier(self) -> float:
        return self.tunables.price_multiplier

    @property
    def primary_skill(self) -> Skill | None:
        return next((skill for skill in self.skills if skill.is_primary), None)

    def get_job_items(
        self, variant: int, predicate: ItemPredicate | None = None
    ) -> tuple[ItemRequirement, ...]:
        items = self.job_items.get(variant)
        if items is None:
            return ()
        if predicate is None:
            return items
        return tuple(item for item in items if predicate(item))

    def has_job_item(self, variant: int, predicate: ItemPredicate | None = None) -> bool:
        items = self.job_items.get(variant, ())
        if predicate is None:
            return bool(items)
        return any(predicate(item) for item in items)

    def top_level_items(self, variant: int) -> tuple[ItemRequirement, ...]:
        return self.get_job_items(variant, lambda item: not item.is_nested)

    def parent_of(self, variant: int, item: ItemRequirement) -> ItemRequirement | None:
        if item.parent_index is None:
            return None
        items = self.job_items.get(variant, ())
        if 0 <= item.parent_index < len(items):
            return items[item.parent_index]
        return None

    def __repr__(self) -> str:
        return f"JobDefinition({self.identifier!r}, variants={self.variants})"


def _load_icon(node: AttributeNode, loader: SpriteLoader) -> Any:
    sprite_node = node.first_child()
    if sprite_node is None:
        return None
    return loader.load(sprite_node)


__all__ = [
    "ItemPredicate",
    "JobDefinition",
    "ReferenceSpriteLoader",
    "parse_autonomous_objective",
    "parse_skill",
    "parse_tunables",
    "sort_skills",
]
