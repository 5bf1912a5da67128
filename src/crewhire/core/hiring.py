"""Hire candidate synthesis and the per-location candidate pool."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import structlog

from ..diagnostics import DiagnosticLog
from ..randomness import UnsyncedRandom, require_domain
from ..schemas.candidate import CandidateRecord, ReputationGate
from .contracts import FactionLike, LocationLike, NPCTemplateRegistry
from .jobs import JobDefinition

MAX_AVAILABLE_CHARACTERS = 6


@dataclass(eq=False)
class HireCandidate:
    """A character offered for hire. Compared by identity."""

    name: str
    job: JobDefinition
    variant: int = 0
    skill_levels: dict[str, float] = field(default_factory=dict)
    base_salary: int = 0
    min_reputation_to_hire: ReputationGate | None = None
    removed: bool = False

    @property
    def job_id(self) -> str:
        return self.job.identifier

    def rename(self, new_name: str) -> None:
        self.name = new_name

    def release(self) -> None:
        self.removed = True

    def to_record(self, salary: int | None = None) -> CandidateRecord:
        return CandidateRecord(
            name=self.name,
            job_id=self.job_id,
            variant=self.variant,
            skills=dict(self.skill_levels),
            base_salary=self.base_salary,
            salary=self.base_salary if salary is None else salary,
            min_reputation_to_hire=self.min_reputation_to_hire,
        )


def calculate_base_salary(job: JobDefinition, skill_levels: dict[str, float]) -> int:
    salary = 0
    for skill in job.skills:
        salary += int(skill_levels.get(skill.identifier, 0.0) * skill.price_multiplier)
    return int(salary * job.price_multiplier)


class CandidateFactory:
    """Synthesize candidates for a job.

    Candidates are generated once and then kept in the campaign save, so every
    draw here uses the unsynced random domain.
    """

    def __init__(self, rng: UnsyncedRandom, *, name_pool: Sequence[str] | None = ()) -> None:
        self._rng = require_domain(rng, UnsyncedRandom)
        self._name_pool = list(name_pool or ())

    @property
    def rng(self) -> UnsyncedRandom:
        return self._rng  # type: ignore[return-value]

    def create(self, job: JobDefinition, *, name: str | None = None) -> HireCandidate:
        variant = self._rng.int_range(0, job.variants)
        levels = {
            skill.identifier: round(
                self._rng.float_range(skill.level_range.start, skill.level_range.end), 1
            )
            for skill in job.skills
        }
        return HireCandidate(
            name=name or self._pick_name(job),
            job=job,
            variant=variant,
            skill_levels=levels,
            base_salary=calculate_base_salary(job, levels),
        )

    def _pick_name(self, job: JobDefinition) -> str:
        name = self._rng.choice(self._name_pool)
        return name if name else job.identifier.title()


class HireCandidatePool:
    """Characters offered for hire at the current location.

    Owned by one location context at a time; not thread-safe.
    """

    def __init__(
        self,
        factory: CandidateFactory,
        *,
        npc_templates: NPCTemplateRegistry | None = None,
        max_available: int | None = MAX_AVAILABLE_CHARACTERS,
        diagnostics: DiagnosticLog | None = None,
    ) -> None:
        self._factory = factory
        self._npc_templates = npc_templates
        self.max_available = MAX_AVAILABLE_CHARACTERS if max_available is None else max_available
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self.available_characters: list[HireCandidate] = []
        self.pending_hires: list[HireCandidate] = []
        self._logger = structlog.get_logger(__name__)

    def generate_characters(self, location: LocationLike, amount: int | None = None) -> list[HireCandidate]:
        """Replace the available candidates with a fresh batch for ``location``.

        Jobs missing from the crew come first and use up ``amount``; the rest is
        drawn from the location type. Faction hireables are added on top and may
        push the pool past ``max_available``.
        """
        remaining = self.max_available if amount is None else amount
        self.remove()

        for job in location.type.get_hireables_missing_from_crew():
            self._add_character(job)
            remaining -= 1
        for _ in range(remaining):
            self._add_character(location.type.get_random_hireable())

        if location.faction is not None:
            self._generate_faction_characters(location.faction)
        if location.secondary_faction is not None:
            self._generate_faction_characters(location.secondary_faction)

        self._logger.info(
            "hiring.generated",
            location=location.name,
            candidates=len(self.available_characters),
        )
        return list(self.available_characters)

    def _add_character(self, job: JobDefinition | None) -> None:
        if job is None:
            return
        self.available_characters.append(self._factory.create(job))

    def _generate_faction_characters(self, faction: FactionLike) -> None:
        for hireable in faction.hireable_characters:
            template = (
                self._npc_templates.get(hireable.npc_set_id, hireable.npc_id)
                if self._npc_templates is not None
                else None
            )
            candidate = template.create_candidate(self._factory) if template is not None else None
            if candidate is None:
                self.diagnostics.warn(
                    "unresolved_reference",
                    "hiring.npc_template_not_found",
                    "couldn't create a hireable for the location",
                    npc=hireable.npc_id,
                    npc_set=hireable.npc_set_id,
                    faction=faction.identifier,
                )
                continue
            candidate.min_reputation_to_hire = ReputationGate(
                faction_id=faction.identifier,
                reputation=hireable.min_reputation,
            )
            self.available_characters.append(candidate)

    def remove_character(self, candidate: HireCandidate) -> None:
        if candidate in self.available_characters:
            self.available_characters.remove(candidate)

    def remove(self) -> None:
        for candidate in self.available_characters:
            candidate.release()
        self.available_characters.clear()

    def rename_character(self, candidate: HireCandidate | None, new_name: str | None) -> None:
        if candidate is None or not new_name:
            return
        for pool in (self.available_characters, self.pending_hires):
            match = next((entry for entry in pool if entry is candidate), None)
            if match is not None:
                match.rename(new_name)

    def add_pending(self, candidate: HireCandidate) -> None:
        """Move ``candidate`` from the available list to the pending hires."""
        self.remove_character(candidate)
        if candidate not in self.pending_hires:
            self.pending_hires.append(candidate)

    def confirm_pending(self) -> list[HireCandidate]:
        hired = list(self.pending_hires)
        self.pending_hires.clear()
        return hired

    def __len__(self) -> int:
        return len(self.available_characters)


__all__ = [
    "CandidateFactory",
    "HireCandidate",
    "HireCandidatePool",
    "MAX_AVAILABLE_CHARACTERS",
    "calculate_base_salary",
]
