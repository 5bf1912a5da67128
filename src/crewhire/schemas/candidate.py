"""Serializable views of hire candidates."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReputationGate(BaseModel):
    """Minimum reputation with a faction required before a candidate can be hired."""

    faction_id: str
    reputation: float = 0.0

    model_config = ConfigDict(extra="forbid", frozen=True)


class CandidateRecord(BaseModel):
    """Priced candidate as written by the CLI."""

    name: str
    job_id: str
    variant: int = 0
    skills: dict[str, float] = Field(default_factory=dict)
    base_salary: int = 0
    salary: int = 0
    min_reputation_to_hire: ReputationGate | None = None

    model_config = ConfigDict(extra="forbid")
