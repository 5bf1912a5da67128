"""Registry of loaded job definitions."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Mapping

import structlog
from rapidfuzz import process

from ..randomness import RandomSource
from ..schemas.job import RepairPriority
from .jobs import JobDefinition

JobPredicate = Callable[[JobDefinition], bool]


class JobRegistry:
    """Identifier-keyed collection of job definitions.

    Populated at content-load time and read-only afterwards. Lookups ignore
    identifier case.
    """

    def __init__(
        self,
        jobs: Iterable[JobDefinition] = (),
        *,
        repair_priorities: Iterable[RepairPriority] = (),
    ) -> None:
        self._jobs: dict[str, JobDefinition] = {}
        self._repair_priorities: dict[str, RepairPriority] = {}
        self._logger = structlog.get_logger(__name__)
        for job in jobs:
            self.add(job)
        for priority in repair_priorities:
            self.add_repair_priority(priority)

    def add(self, job: JobDefinition) -> None:
        key = job.identifier.lower()
        if key in self._jobs:
            self._logger.info("job.overridden", job=job.identifier)
        self._jobs[key] = job

    def add_repair_priority(self, priority: RepairPriority) -> None:
        self._repair_priorities[priority.tag.lower()] = priority

    def get(self, identifier: str) -> JobDefinition | None:
        job = self._jobs.get(identifier.lower())
        if job is None:
            self._logger.warning(
                "job.not_found",
                kind="unresolved_reference",
                job=identifier,
                suggestions=self.suggest(identifier),
            )
        return job

    def suggest(self, identifier: str, *, limit: int = 3, score_cutoff: float = 60.0) -> list[str]:
        """Known identifiers that look like ``identifier``."""
        if not identifier or not self._jobs:
            return []
        matches = process.extract(
            identifier.lower(),
            list(self._jobs),
            limit=limit,
            score_cutoff=score_cutoff,
        )
        return [self._jobs[match[0]].identifier for match in matches]

    def random(
        self,
        rng: RandomSource,
        predicate: JobPredicate | None = None,
    ) -> JobDefinition | None:
        """Uniform draw over visible jobs accepted by ``predicate``.

        Candidates are ordered by identifier so a given seed always picks the
        same job. The caller chooses the random domain.
        """
        candidates = [
            job
            for key, job in sorted(self._jobs.items())
            if not job.hidden and (predicate is None or predicate(job))
        ]
        return rng.choice(candidates)

    @property
    def item_repair_priorities(self) -> Mapping[str, float]:
        return {priority.tag: priority.priority for priority in self._repair_priorities.values()}

    def identifiers(self) -> list[str]:
        return [job.identifier for job in self._jobs.values()]

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and identifier.lower() in self._jobs

    def __iter__(self) -> Iterator[JobDefinition]:
        return iter(list(self._jobs.values()))

    def __len__(self) -> int:
        return len(self._jobs)


__all__ = ["JobPredicate", "JobRegistry"]
