"""RuleEngine Staffing — hire, fire, lookups and listings against InMemoryRoster.

Tests cover:
    - hire creates a WORKER with no team; missing names/salary are rejected
    - fire is a silent no-op for unknown ids and detaches team members
    - list_employees with and without level filter
    - list_employees_by_salary strict bounds and defaulting
    - find_employee is an unlocked read; fire locks the team row before the employee
"""

import pytest

from workforce.core.domain_types import EmployeeId, EmployeeLevel
from workforce.core.outcome import Ok, ValidationError


# ─── hire ────────────────────────────────────────────────────────

async def test_hire_creates_worker(engine, roster):
    result = await engine.hire("Jan", "Kowalski", 500.0)
    assert isinstance(result, Ok)
    employee = result.value
    assert employee.id is not None
    assert employee.level == EmployeeLevel.WORKER
    assert employee.team_name is None
    assert roster.employees[employee.id] == employee


async def test_hire_assigns_distinct_ids(engine):
    first = (await engine.hire("Jan", "Kowalski", 500.0)).value
    second = (await engine.hire("Kasia", "Nowak", 2500.0)).value
    assert first.id != second.id


@pytest.mark.parametrize("name,surname", [
    (None, "Kowalski"), ("Jan", None), ("", "Kowalski"), ("Jan", "   "),
])
async def test_hire_requires_name_and_surname(engine, roster, name, surname):
    result = await engine.hire(name, surname, 500.0)
    assert isinstance(result, ValidationError)
    assert result.error_code == "MISSING_NAME"
    assert roster.writes == 0


async def test_hire_rejects_negative_salary(engine, roster):
    result = await engine.hire("Jan", "Kowalski", -1.0)
    assert isinstance(result, ValidationError)
    assert roster.employees == {}


async def test_hire_rejects_missing_salary(engine):
    assert isinstance(await engine.hire("Jan", "Kowalski", None), ValidationError)


# ─── fire ────────────────────────────────────────────────────────

async def test_fire_removes_employee(engine, roster):
    employee = roster.seed_employee()
    assert await engine.fire(employee.id) == Ok(None)
    assert employee.id not in roster.employees


async def test_fire_unknown_employee_is_noop(engine, roster):
    assert await engine.fire(EmployeeId(999)) == Ok(None)
    assert await engine.fire(None) == Ok(None)
    assert roster.writes == 0


async def test_fire_detaches_from_team(engine, roster):
    employee = roster.seed_employee(team_name="Alpha")
    await engine.fire(employee.id)
    assert employee.id not in roster.teams["Alpha"].member_ids


async def test_fire_team_member_locks_team_first(engine, roster):
    employee = roster.seed_employee(team_name="Alpha")
    await engine.fire(employee.id)
    assert roster.locks == [("team", "Alpha"), ("employee", employee.id)]


# ─── find / list ─────────────────────────────────────────────────

async def test_find_employee(engine, roster):
    employee = roster.seed_employee()
    assert await engine.find_employee(employee.id) == Ok(employee)
    missing = await engine.find_employee(EmployeeId(42))
    assert missing.error_code == "EMPLOYEE_NOT_FOUND"
    assert roster.locks == []


async def test_list_employees_without_filter_returns_all(engine, roster):
    roster.seed_employee("Jan", salary=500.0)
    roster.seed_employee("Iza", salary=5000.0, level=EmployeeLevel.MANAGER)
    result = await engine.list_employees()
    assert [e.first_name for e in result.value] == ["Jan", "Iza"]


async def test_list_employees_by_level(engine, roster):
    roster.seed_employee("Jan")
    roster.seed_employee("Iza", level=EmployeeLevel.MANAGER)
    result = await engine.list_employees(EmployeeLevel.MANAGER)
    assert [e.first_name for e in result.value] == ["Iza"]


async def test_list_employees_empty_roster(engine):
    assert await engine.list_employees() == Ok([])


# ─── list_employees_by_salary ────────────────────────────────────

@pytest.fixture
def salaried(roster):
    roster.seed_employee("Jan", "Kowalski", 500.0)
    roster.seed_employee("Kasia", "Nowak", 2500.0)
    roster.seed_employee("Iza", "Lesniak", 5000.0, EmployeeLevel.MANAGER)


async def test_salary_range_strict_on_both_bounds(engine, salaried):
    result = await engine.list_employees_by_salary(499, 501)
    assert [e.salary for e in result.value] == [500.0]


async def test_salary_range_excludes_exact_bounds(engine, salaried):
    result = await engine.list_employees_by_salary(500, 5000)
    assert [e.salary for e in result.value] == [2500.0]


async def test_salary_range_absent_upper_is_unbounded(engine, salaried):
    result = await engine.list_employees_by_salary(1000, None)
    assert [e.salary for e in result.value] == [2500.0, 5000.0]


async def test_salary_range_absent_lower_is_zero(engine, salaried):
    result = await engine.list_employees_by_salary(None, 3000)
    assert [e.salary for e in result.value] == [500.0, 2500.0]


async def test_salary_range_no_bounds_returns_everyone_paid(engine, salaried):
    result = await engine.list_employees_by_salary()
    assert len(result.value) == 3
