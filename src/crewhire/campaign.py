"""Concrete campaign collaborators for the hiring core.

Enough of a crew, faction and location model to drive
:class:`~crewhire.core.hiring.HireCandidatePool` and
:class:`~crewhire.core.salary.SalaryCalculator` from a YAML world document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

import structlog

from .core.contracts import StatType
from .core.hiring import CandidateFactory, HireCandidate
from .core.jobs import JobDefinition
from .core.registry import JobRegistry
from .randomness import UnsyncedRandom
from .schemas.world import WorldConfig

ALL_JOBS = "all"


@dataclass(slots=True)
class CrewMemberRecord:
    name: str
    job_id: str
    stats: dict[str, dict[str, float]] = field(default_factory=dict)

    def get_saved_stat_value(self, stat: StatType, job_id: str) -> float:
        return self.stats.get(stat.value, {}).get(job_id.lower(), 0.0)

    def get_saved_stat_value_with_all(self, stat: StatType, job_id: str) -> float:
        return self.get_saved_stat_value(stat, job_id) + self.get_saved_stat_value(stat, ALL_JOBS)


class SessionCrew:
    """Live and reserve crew of the current session."""

    def __init__(self, members: Iterable[CrewMemberRecord] = ()) -> None:
        self.members = list(members)

    def get_session_crew_characters(self) -> Iterator[CrewMemberRecord]:
        return iter(self.members)

    def has_job(self, job_id: str) -> bool:
        return any(member.job_id.lower() == job_id.lower() for member in self.members)


@dataclass(slots=True)
class HireableJob:
    job: JobDefinition
    commonness: float = 1.0
    always_available_if_missing: bool = False


class LocationType:
    """Which jobs can be hired at a kind of location, and how often."""

    def __init__(
        self,
        identifier: str,
        hireables: Sequence[HireableJob],
        *,
        crew: SessionCrew,
        rng: UnsyncedRandom,
    ) -> None:
        self.identifier = identifier
        self.hireables = list(hireables)
        self._crew = crew
        self._rng = rng

    def get_hireables_missing_from_crew(self) -> list[JobDefinition]:
        return [
            entry.job
            for entry in self.hireables
            if entry.always_available_if_missing and not self._crew.has_job(entry.job.identifier)
        ]

    def get_random_hireable(self) -> JobDefinition | None:
        return self._rng.weighted_choice(
            [entry.job for entry in self.hireables],
            [entry.commonness for entry in self.hireables],
        )


@dataclass(slots=True)
class HireableCharacter:
    npc_set_id: str
    npc_id: str
    min_reputation: float = 0.0


@dataclass(slots=True)
class Faction:
    identifier: str
    hireable_characters: list[HireableCharacter] = field(default_factory=list)


@dataclass(slots=True)
class Location:
    name: str
    type: LocationType
    faction: Faction | None = None
    secondary_faction: Faction | None = None


@dataclass(slots=True)
class HumanTemplate:
    """NPC template that always spawns with the same job (and optionally name)."""

    identifier: str
    job: JobDefinition | None
    name: str | None = None

    def create_candidate(self, factory: CandidateFactory) -> HireCandidate | None:
        if self.job is None:
            return None
        return factory.create(self.job, name=self.name)


class NPCSets:
    """NPC templates keyed by ``(set identifier, npc identifier)``."""

    def __init__(self) -> None:
        self._templates: dict[tuple[str, str], HumanTemplate] = {}

    def add(self, set_id: str, template: HumanTemplate) -> None:
        self._templates[(set_id.lower(), template.identifier.lower())] = template

    def get(self, set_id: str, npc_id: str) -> HumanTemplate | None:
        return self._templates.get((set_id.lower(), npc_id.lower()))

    def __len__(self) -> int:
        return len(self._templates)


class CampaignWorld:
    """Crew, NPC sets, factions and locations resolved against a job registry."""

    def __init__(
        self,
        *,
        crew: SessionCrew,
        npc_sets: NPCSets,
        locations: dict[str, Location],
    ) -> None:
        self.crew = crew
        self.npc_sets = npc_sets
        self._locations = locations
        self._logger = structlog.get_logger(__name__)

    @classmethod
    def from_config(
        cls,
        config: WorldConfig,
        *,
        registry: JobRegistry,
        rng: UnsyncedRandom,
    ) -> "CampaignWorld":
        crew = SessionCrew(
            CrewMemberRecord(
                name=member.name,
                job_id=member.job,
                stats={
                    stat.lower(): {job.lower(): value for job, value in values.items()}
                    for stat, values in member.stats.items()
                },
            )
            for member in config.crew
        )

        npc_sets = NPCSets()
        for npc_set in config.npc_sets:
            for npc in npc_set.npcs:
                npc_sets.add(
                    npc_set.identifier,
                    HumanTemplate(identifier=npc.identifier, job=registry.get(npc.job), name=npc.name),
                )

        factions = {
            faction.identifier.lower(): Faction(
                identifier=faction.identifier,
                hireable_characters=[
                    HireableCharacter(
                        npc_set_id=entry.npc_set,
                        npc_id=entry.npc,
                        min_reputation=entry.min_reputation,
                    )
                    for entry in faction.hireables
                ],
            )
            for faction in config.factions
        }

        location_types: dict[str, LocationType] = {}
        for location_type in config.location_types:
            hireables = []
            for entry in location_type.hireables:
                job = registry.get(entry.job)
                if job is None:
                    continue
                hireables.append(
                    HireableJob(
                        job=job,
                        commonness=entry.commonness,
                        always_available_if_missing=entry.always_available_if_missing,
                    )
                )
            location_types[location_type.identifier.lower()] = LocationType(
                location_type.identifier, hireables, crew=crew, rng=rng
            )

        logger = structlog.get_logger(__name__)

        def resolve_faction(location_name: str, identifier: str | None) -> Faction | None:
            if not identifier:
                return None
            faction = factions.get(identifier.lower())
            if faction is None:
                logger.warning(
                    "location.faction_not_found",
                    kind="unresolved_reference",
                    location=location_name,
                    faction=identifier,
                )
            return faction

        locations: dict[str, Location] = {}
        for location in config.locations:
            location_type = location_types.get(location.type.lower())
            if location_type is None:
                location_type = LocationType(location.type, [], crew=crew, rng=rng)
            locations[location.name.lower()] = Location(
                name=location.name,
                type=location_type,
                faction=resolve_faction(location.name, location.faction),
                secondary_faction=resolve_faction(location.name, location.secondary_faction),
            )

        return cls(crew=crew, npc_sets=npc_sets, locations=locations)

    def location(self, name: str) -> Location | None:
        location = self._locations.get(name.lower())
        if location is None:
            self._logger.warning("location.not_found", kind="unresolved_reference", location=name)
        return location

    def location_names(self) -> list[str]:
        return [location.name for location in self._locations.values()]


__all__ = [
    "CampaignWorld",
    "CrewMemberRecord",
    "Faction",
    "HireableCharacter",
    "HireableJob",
    "HumanTemplate",
    "Location",
    "LocationType",
    "NPCSets",
    "SessionCrew",
]
