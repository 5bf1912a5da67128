from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

import pytest

from crewhire.core.hiring import (
    MAX_AVAILABLE_CHARACTERS,
    CandidateFactory,
    HireCandidate,
    HireCandidatePool,
    calculate_base_salary,
)
from crewhire.core.jobs import JobDefinition
from crewhire.randomness import SyncedRandom, UnsyncedRandom
from crewhire.schemas import JobTunables, LevelRange, ReputationGate, Skill


def build_job(identifier: str, *, variants: int = 1, price_multiplier: float = 1.0) -> JobDefinition:
    return JobDefinition(
        identifier=identifier,
        tunables=JobTunables(price_multiplier=price_multiplier),
        skills=(Skill(identifier="mechanical", level_range=LevelRange(start=40, end=40)),),
        job_items=MappingProxyType({index: () for index in range(variants)}),
        variants=variants,
    )


@dataclass
class StubLocationType:
    missing: list[JobDefinition] = field(default_factory=list)
    random_job: JobDefinition | None = None
    random_calls: int = 0

    def get_hireables_missing_from_crew(self) -> list[JobDefinition]:
        return list(self.missing)

    def get_random_hireable(self) -> JobDefinition | None:
        self.random_calls += 1
        return self.random_job


@dataclass
class StubHireable:
    npc_set_id: str
    npc_id: str
    min_reputation: float = 0.0


@dataclass
class StubFaction:
    identifier: str
    hireable_characters: list[StubHireable] = field(default_factory=list)


@dataclass
class StubLocation:
    type: StubLocationType
    name: str = "Karhu Station"
    faction: StubFaction | None = None
    secondary_faction: StubFaction | None = None


@dataclass
class StubTemplate:
    identifier: str
    job: JobDefinition

    def create_candidate(self, factory: CandidateFactory) -> HireCandidate:
        return factory.create(self.job, name=self.identifier)


class StubTemplates:
    def __init__(self, templates: dict[tuple[str, str], StubTemplate]) -> None:
        self._templates = templates

    def get(self, set_id: str, npc_id: str) -> StubTemplate | None:
        return self._templates.get((set_id, npc_id))


MECHANIC = build_job("mechanic", variants=3)
ASSISTANT = build_job("assistant")
GUARD = build_job("securityofficer")


def build_pool(templates: StubTemplates | None = None) -> HireCandidatePool:
    factory = CandidateFactory(UnsyncedRandom(seed=3), name_pool=["Ada", "Boris"])
    return HireCandidatePool(factory, npc_templates=templates)


def build_templates() -> StubTemplates:
    return StubTemplates(
        {
            ("outpost", "guard"): StubTemplate("guard", GUARD),
            ("outpost", "medic"): StubTemplate("medic", ASSISTANT),
            ("separatists", "smuggler"): StubTemplate("smuggler", ASSISTANT),
        }
    )


def test_generate_characters_orders_missing_random_then_faction_candidates():
    pool = build_pool(build_templates())
    stale = HireCandidate(name="Stale", job=ASSISTANT)
    pool.available_characters.append(stale)
    location = StubLocation(
        type=StubLocationType(missing=[MECHANIC], random_job=ASSISTANT),
        faction=StubFaction(
            "coalition",
            [StubHireable("outpost", "guard", 20.0), StubHireable("outpost", "medic", 10.0)],
        ),
        secondary_faction=StubFaction("separatists", [StubHireable("separatists", "smuggler", 5.0)]),
    )

    candidates = pool.generate_characters(location, amount=3)

    assert len(candidates) == 6
    assert stale not in pool.available_characters
    assert stale.removed is True
    assert [candidate.job_id for candidate in candidates] == [
        "mechanic",
        "assistant",
        "assistant",
        "securityofficer",
        "assistant",
        "assistant",
    ]
    assert location.type.random_calls == 2
    assert [candidate.min_reputation_to_hire for candidate in candidates[:3]] == [None, None, None]
    assert candidates[3].min_reputation_to_hire == ReputationGate(faction_id="coalition", reputation=20.0)
    assert candidates[5].min_reputation_to_hire == ReputationGate(faction_id="separatists", reputation=5.0)
    assert candidates[3].name == "guard"


def test_missing_jobs_can_exhaust_the_amount():
    pool = build_pool()
    location_type = StubLocationType(missing=[MECHANIC, GUARD, ASSISTANT], random_job=ASSISTANT)

    candidates = pool.generate_characters(StubLocation(type=location_type), amount=1)

    assert [candidate.job_id for candidate in candidates] == ["mechanic", "securityofficer", "assistant"]
    assert location_type.random_calls == 0


def test_default_amount_is_the_pool_maximum():
    pool = build_pool()
    location_type = StubLocationType(random_job=ASSISTANT)

    candidates = pool.generate_characters(StubLocation(type=location_type))

    assert len(candidates) == MAX_AVAILABLE_CHARACTERS


def test_random_hireable_without_job_adds_nothing():
    pool = build_pool()

    candidates = pool.generate_characters(StubLocation(type=StubLocationType(random_job=None)), amount=4)

    assert candidates == []


def test_faction_candidates_are_not_capped():
    pool = build_pool(build_templates())
    hireables = [StubHireable("outpost", "guard") for _ in range(MAX_AVAILABLE_CHARACTERS)]
    location = StubLocation(
        type=StubLocationType(random_job=ASSISTANT),
        faction=StubFaction("coalition", hireables),
    )

    candidates = pool.generate_characters(location)

    assert len(candidates) == MAX_AVAILABLE_CHARACTERS * 2


def test_unresolved_npc_templates_are_skipped():
    pool = build_pool(build_templates())
    location = StubLocation(
        type=StubLocationType(),
        faction=StubFaction(
            "coalition",
            [StubHireable("outpost", "ghost"), StubHireable("outpost", "guard")],
        ),
    )

    candidates = pool.generate_characters(location, amount=0)

    assert [candidate.name for candidate in candidates] == ["guard"]
    (warning,) = pool.diagnostics.of_kind("unresolved_reference")
    assert warning.context["npc"] == "ghost"
    assert warning.context["faction"] == "coalition"


def test_variants_are_drawn_within_job_variant_count():
    factory = CandidateFactory(UnsyncedRandom(seed=11))

    variants = {factory.create(MECHANIC).variant for _ in range(100)}

    assert variants == {0, 1, 2}
    assert factory.create(build_job("empty", variants=0)).variant == 0


def test_candidate_factory_requires_unsynced_random():
    with pytest.raises(TypeError):
        CandidateFactory(SyncedRandom(seed=1))  # type: ignore[arg-type]


def test_base_salary_follows_skill_levels_and_job_multiplier():
    job = build_job("captain", price_multiplier=1.5)
    candidate = CandidateFactory(UnsyncedRandom(seed=0)).create(job, name="Nils")

    assert candidate.skill_levels == {"mechanical": 40.0}
    assert candidate.base_salary == int(40 * 25 * 1.5)
    assert calculate_base_salary(job, {}) == 0
    assert candidate.name == "Nils"


def test_rename_character_in_available_and_pending_lists():
    pool = build_pool()
    available = HireCandidate(name="Ada", job=ASSISTANT)
    pending = HireCandidate(name="Boris", job=ASSISTANT)
    pool.available_characters.append(available)
    pool.pending_hires.append(pending)

    pool.rename_character(available, "Adele")
    pool.rename_character(pending, "Bo")

    assert available.name == "Adele"
    assert pending.name == "Bo"


def test_rename_character_is_a_no_op_for_unknown_or_empty_input():
    pool = build_pool()
    known = HireCandidate(name="Ada", job=ASSISTANT)
    twin = HireCandidate(name="Ada", job=ASSISTANT)
    pool.available_characters.append(known)

    pool.rename_character(twin, "Someone")
    pool.rename_character(None, "Someone")
    pool.rename_character(known, "")

    assert known.name == "Ada"
    assert twin.name == "Ada"


def test_remove_character_and_remove_all():
    pool = build_pool()
    first = HireCandidate(name="Ada", job=ASSISTANT)
    second = HireCandidate(name="Boris", job=ASSISTANT)
    pool.available_characters.extend([first, second])

    pool.remove_character(first)
    pool.remove_character(HireCandidate(name="Ghost", job=ASSISTANT))
    assert pool.available_characters == [second]

    pool.remove()
    assert pool.available_characters == []
    assert second.removed is True


def test_pending_hires_flow():
    pool = build_pool()
    candidate = HireCandidate(name="Ada", job=ASSISTANT)
    pool.available_characters.append(candidate)

    pool.add_pending(candidate)

    assert pool.available_characters == []
    assert pool.pending_hires == [candidate]
    assert pool.confirm_pending() == [candidate]
    assert pool.pending_hires == []
