"""Pydantic schema for campaign world documents (crew, factions, locations)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CrewMemberConfig(BaseModel):
    name: str
    job: str
    # stat -> job identifier (or "all") -> value
    stats: dict[str, dict[str, float]] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


class NPCConfig(BaseModel):
    identifier: str
    job: str
    name: str | None = None

    model_config = ConfigDict(extra="forbid")


class NPCSetConfig(BaseModel):
    identifier: str
    npcs: list[NPCConfig] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class HireableCharacterConfig(BaseModel):
    npc_set: str
    npc: str
    min_reputation: float = 0.0

    model_config = ConfigDict(extra="forbid")


class FactionConfig(BaseModel):
    identifier: str
    hireables: list[HireableCharacterConfig] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class HireableJobConfig(BaseModel):
    job: str
    commonness: float = Field(default=1.0, ge=0.0)
    always_available_if_missing: bool = False

    model_config = ConfigDict(extra="forbid")


class LocationTypeConfig(BaseModel):
    identifier: str
    hireables: list[HireableJobConfig] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class LocationConfig(BaseModel):
    name: str
    type: str
    faction: str | None = None
    secondary_faction: str | None = None

    model_config = ConfigDict(extra="forbid")


class WorldConfig(BaseModel):
    crew: list[CrewMemberConfig] = Field(default_factory=list)
    npc_sets: list[NPCSetConfig] = Field(default_factory=list)
    factions: list[FactionConfig] = Field(default_factory=list)
    location_types: list[LocationTypeConfig] = Field(default_factory=list)
    locations: list[LocationConfig] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


def load_world(raw: Any) -> WorldConfig:
    if raw is None:
        return WorldConfig()
    return WorldConfig.model_validate(raw)
