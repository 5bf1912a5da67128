from __future__ import annotations

import pytest
from pydantic import ValidationError

from crewhire.schemas import (
    AutonomousObjective,
    CandidateRecord,
    ItemRequirement,
    JobTunables,
    ReputationGate,
)


def test_tunables_defaults():
    tunables = JobTunables()

    assert tunables.ui_color == (1.0, 1.0, 1.0, 1.0)
    assert tunables.idle_behavior.value == "passive"
    assert tunables.initial_count == 0
    assert tunables.campaign_setup_order == 10
    assert tunables.max_number == 100
    assert tunables.price_multiplier == 1.0
    assert tunables.hidden_job is False


def test_schemas_are_frozen_and_strict():
    item = ItemRequirement(item_id="wrench")

    with pytest.raises(ValidationError):
        item.amount = 3  # type: ignore[misc]
    with pytest.raises(ValidationError):
        ItemRequirement(item_id="wrench", colour="red")  # type: ignore[call-arg]
    with pytest.raises(ValidationError):
        AutonomousObjective(identifier="repair", priority_modifier=-1)


def test_candidate_record_serializes_reputation_gate():
    record = CandidateRecord(
        name="Ada",
        job_id="mechanic",
        min_reputation_to_hire=ReputationGate(faction_id="coalition", reputation=20),
    )

    dumped = record.model_dump(mode="json")

    assert dumped["min_reputation_to_hire"] == {"faction_id": "coalition", "reputation": 20.0}
    assert dumped["salary"] == 0
