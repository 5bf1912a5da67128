"""Dependency injection container for job content and hiring."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import (
    CandidateFactory,
    HireCandidatePool,
    JobContentLoader,
    JobRegistry,
    SalaryCalculator,
)
from .diagnostics import DiagnosticLog
from .randomness import SyncedRandom, UnsyncedRandom
from .schemas.config import AppConfig


class HiringContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    diagnostics = providers.Singleton(DiagnosticLog)

    job_registry = providers.Singleton(JobRegistry)

    content_loader = providers.Factory(
        JobContentLoader,
        diagnostics=diagnostics,
    )

    synced_random = providers.Singleton(SyncedRandom, seed=config.hiring.seed)
    unsynced_random = providers.Singleton(UnsyncedRandom, seed=config.hiring.seed)

    candidate_factory = providers.Singleton(
        CandidateFactory,
        rng=unsynced_random,
        name_pool=config.hiring.name_pool,
    )

    crew = providers.Object(None)
    npc_templates = providers.Object(None)

    hire_pool = providers.Factory(
        HireCandidatePool,
        factory=candidate_factory,
        npc_templates=npc_templates,
        max_available=config.hiring.max_available,
        diagnostics=diagnostics,
    )

    salary_calculator = providers.Singleton(SalaryCalculator, crew=crew)


def create_container(*, settings: dict | None = None) -> HiringContainer:
    """Instantiate container with optional overrides."""

    container = HiringContainer()
    container.config.from_dict(AppConfig().model_dump(include={"hiring"}))

    if not settings:
        return container

    hiring_settings = settings.get("hiring", {}) if isinstance(settings, dict) else {}
    if hiring_settings:
        container.config.from_dict({"hiring": hiring_settings})

    return container
