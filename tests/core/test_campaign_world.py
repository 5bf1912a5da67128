from __future__ import annotations

from types import MappingProxyType

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from crewhire.campaign import CampaignWorld, CrewMemberRecord
from crewhire.core.contracts import StatType
from crewhire.core.hiring import CandidateFactory, HireCandidatePool
from crewhire.core.jobs import JobDefinition
from crewhire.core.registry import JobRegistry
from crewhire.core.salary import SalaryCalculator
from crewhire.randomness import UnsyncedRandom
from crewhire.schemas.world import load_world


def build_registry() -> JobRegistry:
    return JobRegistry(
        JobDefinition(identifier=identifier, job_items=MappingProxyType({0: ()}), variants=1)
        for identifier in ("captain", "mechanic", "assistant", "securityofficer")
    )


def build_world(rng: UnsyncedRandom) -> CampaignWorld:
    config = load_world(
        {
            "crew": [
                {"name": "Ada", "job": "captain"},
                {
                    "name": "Boris",
                    "job": "assistant",
                    "stats": {"HireCostMultiplier": {"all": -0.1, "mechanic": -0.2}},
                },
            ],
            "npc_sets": [
                {
                    "identifier": "outpostnpcs",
                    "npcs": [
                        {"identifier": "guard", "job": "securityofficer", "name": "Sgt. Holm"},
                        {"identifier": "ghost", "job": "unknownjob"},
                    ],
                }
            ],
            "factions": [
                {
                    "identifier": "coalition",
                    "hireables": [
                        {"npc_set": "outpostnpcs", "npc": "guard", "min_reputation": 25},
                        {"npc_set": "outpostnpcs", "npc": "ghost"},
                    ],
                }
            ],
            "location_types": [
                {
                    "identifier": "outpost",
                    "hireables": [
                        {"job": "mechanic", "commonness": 1, "always_available_if_missing": True},
                        {"job": "captain", "always_available_if_missing": True},
                        {"job": "assistant", "commonness": 3},
                    ],
                }
            ],
            "locations": [{"name": "Karhu", "type": "outpost", "faction": "coalition"}],
        }
    )
    return CampaignWorld.from_config(config, registry=build_registry(), rng=rng)


def test_missing_jobs_exclude_jobs_already_in_crew():
    world = build_world(UnsyncedRandom(seed=5))
    location = world.location("karhu")

    assert [job.identifier for job in location.type.get_hireables_missing_from_crew()] == ["mechanic"]
    assert location.type.get_random_hireable().identifier in {"mechanic", "captain", "assistant"}


def test_crew_stats_include_the_all_jobs_value():
    member = CrewMemberRecord(name="Boris", job_id="assistant", stats={"hirecostmultiplier": {"all": -0.1, "mechanic": -0.2}})

    assert member.get_saved_stat_value_with_all(StatType.HIRE_COST_MULTIPLIER, "mechanic") == -0.1 + -0.2
    assert member.get_saved_stat_value_with_all(StatType.HIRE_COST_MULTIPLIER, "captain") == -0.1


def test_world_drives_hiring_and_pricing():
    rng = UnsyncedRandom(seed=5)
    world = build_world(rng)
    pool = HireCandidatePool(CandidateFactory(rng), npc_templates=world.npc_sets)

    candidates = pool.generate_characters(world.location("Karhu"), amount=2)

    assert [candidate.job_id for candidate in candidates][0] == "mechanic"
    assert len(candidates) == 3
    guard = candidates[-1]
    assert guard.name == "Sgt. Holm"
    assert guard.min_reputation_to_hire.reputation == 25
    assert len(pool.diagnostics.of_kind("unresolved_reference")) == 1

    calculator = SalaryCalculator(world.crew)
    assert calculator.crew_multiplier("mechanic") == -0.1 + -0.2


def test_unknown_location_returns_none():
    world = build_world(UnsyncedRandom(seed=5))

    assert world.location("Nowhere") is None
    assert world.location_names() == ["Karhu"]


def test_unknown_location_faction_is_reported():
    config = load_world(
        {
            "location_types": [{"identifier": "outpost"}],
            "locations": [{"name": "Karhu", "type": "outpost", "faction": "separatists"}],
        }
    )

    with capture_logs() as logs:
        world = CampaignWorld.from_config(config, registry=build_registry(), rng=UnsyncedRandom(seed=1))

    assert world.location("Karhu").faction is None
    (entry,) = [log for log in logs if log["event"] == "location.faction_not_found"]
    assert entry["kind"] == "unresolved_reference"
    assert entry["faction"] == "separatists"


def test_crew_entries_only_accept_known_fields():
    with pytest.raises(ValidationError):
        load_world({"crew": [{"name": "Boris", "job": "assistant", "reserve": True}]})
