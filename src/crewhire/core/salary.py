"""Hire pricing adjusted by crew stat bonuses."""

from __future__ import annotations

import math
from typing import Iterable

from .contracts import CrewProvider, StatType
from .hiring import HireCandidate


class SalaryCalculator:
    """Price hire candidates.

    Every live or reserve crew member may carry a saved hire-cost multiplier
    for the candidate's job; the contributions are summed and the total
    discount is capped at 100%.
    """

    def __init__(self, crew: CrewProvider | None = None) -> None:
        self._crew = crew

    def crew_multiplier(self, job_id: str) -> float:
        if self._crew is None:
            return 0.0
        total = 0.0
        for member in self._crew.get_session_crew_characters():
            if member is None:
                continue
            value = member.get_saved_stat_value_with_all(StatType.HIRE_COST_MULTIPLIER, job_id)
            total += value or 0.0
        return total

    def get_salary_for(self, candidate: HireCandidate) -> int:
        final_multiplier = 1.0 + max(self.crew_multiplier(candidate.job_id), -1.0)
        # drop float noise before flooring: 100 * 0.1 is 10
        return math.floor(round(candidate.base_salary * final_multiplier, 6))

    def get_salary_for_all(self, candidates: Iterable[HireCandidate]) -> int:
        return sum(self.get_salary_for(candidate) for candidate in candidates)


__all__ = ["SalaryCalculator"]
