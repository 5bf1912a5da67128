"""Pydantic models for the parts of a job definition."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class GameModeScope(str, Enum):
    """Game modes an item requirement applies to."""

    ANY = "any"
    PVP = "pvp"
    PVE = "pve"


class TeamType(str, Enum):
    NONE = "none"
    TEAM1 = "team1"
    TEAM2 = "team2"
    FRIENDLY_NPC = "friendlynpc"


class IdleBehavior(str, Enum):
    """How a character behaves when it has nothing particular to do."""

    PASSIVE = "passive"
    ACTIVE = "active"
    STAY_IN_HULL = "stayinhull"


class ItemRequirement(BaseModel):
    """One spawn/equip item entry inside a job variant.

    ``parent_index`` points at another entry of the same variant's flat list.
    The relation is only used for scope inheritance and for telling nested
    entries apart from top-level ones.
    """

    item_id: str
    item_id_team2: str = ""
    amount: int = Field(default=1, ge=0)
    infinite: bool = False
    equip: bool = False
    outfit: bool = False
    show_preview: bool = True
    game_mode: GameModeScope = GameModeScope.ANY
    parent_index: int | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def is_nested(self) -> bool:
        return self.parent_index is not None

    def resolve_identifier(self, team: TeamType, is_pvp: bool) -> str:
        """Return the item to spawn for ``team`` in the given mode, or ``""``.

        Does not look at the parent entry; scope was inherited at parse time.
        """
        if self.game_mode is GameModeScope.PVP and not is_pvp:
            return ""
        if self.game_mode is GameModeScope.PVE and is_pvp:
            return ""
        if team is TeamType.TEAM2 and self.item_id_team2:
            return self.item_id_team2
        return self.item_id


class LevelRange(BaseModel):
    start: float = 0.0
    end: float = 0.0

    model_config = ConfigDict(extra="forbid", frozen=True)


class Skill(BaseModel):
    """Skill granted by a job, with its starting level range."""

    identifier: str
    level_range: LevelRange = Field(default_factory=LevelRange)
    pvp_level_range: LevelRange | None = None
    is_primary: bool = False
    price_multiplier: float = 25.0

    model_config = ConfigDict(extra="forbid", frozen=True)

    def level_range_for(self, is_pvp: bool) -> LevelRange:
        if is_pvp and self.pvp_level_range is not None:
            return self.pvp_level_range
        return self.level_range


class AutonomousObjective(BaseModel):
    """Objective the character pursues on its own, with a priority modifier."""

    identifier: str = ""
    option: str = ""
    priority_modifier: float = Field(default=1.0, ge=0.0)
    ignore_at_outpost: bool = False
    ignore_at_non_outpost: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)


class SpriteReference(BaseModel):
    """Unloaded icon description handed out by the default sprite loader."""

    texture: str = ""
    source_rect: tuple[int, ...] = ()
    attributes: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid", frozen=True)


class JobTunables(BaseModel):
    """Numeric and behavioral job settings with their documented defaults."""

    ui_color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    idle_behavior: IdleBehavior = Field(
        default=IdleBehavior.PASSIVE,
        description="How should the character behave when idling?",
    )
    only_job_specific_dialog: bool = Field(
        default=False,
        description="Only speak lines meant for this job.",
    )
    initial_count: int = Field(
        default=0,
        description="Characters with this job in a new single player campaign crew.",
    )
    campaign_setup_order: int = Field(default=10, description="Order in the campaign setup UI.")
    allow_always: bool = Field(
        default=False,
        description="Preferred job is granted regardless of the maximum number or spawnpoints.",
    )
    max_number: int = Field(default=100, description="How many crew members can have the job.")
    min_number: int = Field(default=0, description="How many crew members are required to have the job.")
    min_karma: float = Field(default=0.0, description="Minimum karma to be assigned the job.")
    price_multiplier: float = Field(default=1.0, description="Multiplier on the base hiring cost.")
    vitality_modifier: float = Field(
        default=0.0,
        description="Added to the default vitality of the character.",
    )
    hidden_job: bool = Field(
        default=False,
        description="Hidden jobs are not selectable by players but can be used by NPCs.",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)


class RepairPriority(BaseModel):
    """Repair priority of items carrying ``tag``; negative means unset."""

    tag: str
    priority: float = -1.0

    model_config = ConfigDict(extra="forbid", frozen=True)
