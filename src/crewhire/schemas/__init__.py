"""Pydantic schema definitions for job content and hiring."""

from __future__ import annotations

from .candidate import CandidateRecord, ReputationGate
from .job import (
    AutonomousObjective,
    GameModeScope,
    IdleBehavior,
    ItemRequirement,
    JobTunables,
    LevelRange,
    RepairPriority,
    Skill,
    SpriteReference,
    TeamType,
)

__all__ = [
    "AutonomousObjective",
    "CandidateRecord",
    "GameModeScope",
    "IdleBehavior",
    "ItemRequirement",
    "JobTunables",
    "LevelRange",
    "RepairPriority",
    "ReputationGate",
    "Skill",
    "SpriteReference",
    "TeamType",
]
