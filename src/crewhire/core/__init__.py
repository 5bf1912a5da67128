"""Job definition and hiring core."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .content import ContentFormatError, JobContentLoader, read_content_file
from .contracts import (
    CrewMember,
    CrewProvider,
    LocationLike,
    LocationTypeLike,
    NPCTemplate,
    NPCTemplateRegistry,
    SpriteLoader,
    StatType,
    TextLookup,
)
from .hiring import (
    MAX_AVAILABLE_CHARACTERS,
    CandidateFactory,
    HireCandidate,
    HireCandidatePool,
    calculate_base_salary,
)
from .items import parse_item_set
from .jobs import JobDefinition, ReferenceSpriteLoader
from .registry import JobRegistry
from .salary import SalaryCalculator

__all__ = [
    "CandidateFactory",
    "ContentFormatError",
    "CrewMember",
    "CrewProvider",
    "HireCandidate",
    "HireCandidatePool",
    "JobContentLoader",
    "JobDefinition",
    "JobRegistry",
    "LocationLike",
    "LocationTypeLike",
    "MAX_AVAILABLE_CHARACTERS",
    "NPCTemplate",
    "NPCTemplateRegistry",
    "ReferenceSpriteLoader",
    "SalaryCalculator",
    "SpriteLoader",
    "StatType",
    "TextLookup",
    "calculate_base_salary",
    "parse_item_set",
    "read_content_file",
]
