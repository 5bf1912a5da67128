from __future__ import annotations

from crewhire.core.contracts import StatType
from crewhire.core.hiring import HireCandidate
from crewhire.core.jobs import JobDefinition
from crewhire.core.salary import SalaryCalculator


class StubMember:
    def __init__(self, values: dict[str, float | None]) -> None:
        self._values = values
        self.calls: list[tuple[StatType, str]] = []

    def get_saved_stat_value_with_all(self, stat: StatType, job_id: str) -> float | None:
        self.calls.append((stat, job_id))
        return self._values.get(job_id)


class StubCrew:
    def __init__(self, members: list[StubMember | None]) -> None:
        self._members = members

    def get_session_crew_characters(self) -> list[StubMember | None]:
        return list(self._members)


def build_candidate(base_salary: int = 100, job_id: str = "mechanic") -> HireCandidate:
    return HireCandidate(name="Ada", job=JobDefinition(identifier=job_id), base_salary=base_salary)


def test_discount_is_capped_at_full_price():
    crew = StubCrew([StubMember({"mechanic": -1.0}), StubMember({"mechanic": -0.5})])

    assert SalaryCalculator(crew).get_salary_for(build_candidate()) == 0


def test_positive_multiplier_raises_salary():
    crew = StubCrew([StubMember({"mechanic": 0.2})])

    assert SalaryCalculator(crew).get_salary_for(build_candidate()) == 120


def test_contributions_only_count_for_the_candidate_job():
    member = StubMember({"captain": 0.5, "mechanic": None})
    crew = StubCrew([member, None])

    assert SalaryCalculator(crew).get_salary_for(build_candidate()) == 100
    assert member.calls == [(StatType.HIRE_COST_MULTIPLIER, "mechanic")]


def test_result_is_floored():
    crew = StubCrew([StubMember({"mechanic": -0.25})])

    assert SalaryCalculator(crew).get_salary_for(build_candidate(base_salary=99)) == 74


def test_salary_for_collection_is_elementwise_sum():
    crew = StubCrew([StubMember({"mechanic": 0.5, "captain": -0.5})])
    candidates = [build_candidate(100), build_candidate(200, "captain"), build_candidate(10)]

    assert SalaryCalculator(crew).get_salary_for_all(candidates) == 150 + 100 + 15
    assert SalaryCalculator(crew).get_salary_for_all([]) == 0


def test_without_crew_base_salary_is_charged():
    assert SalaryCalculator().get_salary_for(build_candidate(base_salary=321)) == 321


def test_exact_discounts_are_not_lost_to_float_rounding():
    crew = StubCrew([StubMember({"mechanic": -0.9})])

    assert SalaryCalculator(crew).get_salary_for(build_candidate(base_salary=100)) == 10
