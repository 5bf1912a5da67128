"""Collaborator contracts consumed by the job and hiring core."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, Protocol, Sequence, runtime_checkable

from ..adapters import AttributeNode

if TYPE_CHECKING:
    from .hiring import CandidateFactory, HireCandidate
    from .jobs import JobDefinition


class StatType(str, Enum):
    """Saved character stats the hiring core reads."""

    HIRE_COST_MULTIPLIER = "hirecostmultiplier"


@runtime_checkable
class TextLookup(Protocol):
    def get(self, key: str) -> str | None:
        """Localized text for ``key``, or ``None``."""


@runtime_checkable
class SpriteLoader(Protocol):
    """Turns an icon block into whatever the host uses as a sprite."""

    def load(self, node: AttributeNode) -> Any:
        """Return a sprite for the icon node."""


@runtime_checkable
class LocationTypeLike(Protocol):
    def get_hireables_missing_from_crew(self) -> Sequence["JobDefinition"]:
        """Jobs that should always be offered because nobody in the crew has them."""

    def get_random_hireable(self) -> "JobDefinition | None":
        """Draw one hireable job using the location type's weights."""


@runtime_checkable
class HireableCharacterLike(Protocol):
    npc_set_id: str
    npc_id: str
    min_reputation: float


@runtime_checkable
class FactionLike(Protocol):
    identifier: str
    hireable_characters: Sequence[HireableCharacterLike]


@runtime_checkable
class LocationLike(Protocol):
    name: str
    type: LocationTypeLike
    faction: FactionLike | None
    secondary_faction: FactionLike | None


@runtime_checkable
class NPCTemplate(Protocol):
    identifier: str

    def create_candidate(self, factory: "CandidateFactory") -> "HireCandidate | None":
        """Synthesize a hire candidate through the unsynced candidate factory."""


@runtime_checkable
class NPCTemplateRegistry(Protocol):
    def get(self, set_id: str, npc_id: str) -> NPCTemplate | None:
        """Return the template or ``None`` when it does not exist."""


@runtime_checkable
class CrewMember(Protocol):
    def get_saved_stat_value_with_all(self, stat: StatType, job_id: str) -> float | None:
        """Saved stat value for ``job_id`` plus the value saved for all jobs."""


@runtime_checkable
class CrewProvider(Protocol):
    def get_session_crew_characters(self) -> Iterable[CrewMember | None]:
        """Live and reserve crew members of the current session."""


__all__ = [
    "CrewMember",
    "CrewProvider",
    "FactionLike",
    "HireableCharacterLike",
    "LocationLike",
    "LocationTypeLike",
    "NPCTemplate",
    "NPCTemplateRegistry",
    "SpriteLoader",
    "StatType",
    "TextLookup",
]
