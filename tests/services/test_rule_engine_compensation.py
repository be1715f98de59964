"""RuleEngine Compensation — raises, promotions and payroll sums against InMemoryRoster.

Tests cover:
    - give_raise: arithmetic on [-5, 100], rejections leave salary untouched
    - give_promotion: transitions with raise, terminal levels, unknown employee
    - give_promotion: refused when it would duplicate a LEAD/MANAGER in the team
    - salaries(level) requires a level; summarize_salaries covers everyone
    - give_promotion locks the team row before any employee row
"""

import pytest

from workforce.core.domain_types import EmployeeId, EmployeeLevel
from workforce.core.outcome import Ok, ValidationError


# ─── give_raise ──────────────────────────────────────────────────

@pytest.mark.parametrize("percent", [-5, 0, 6, 33.3, 100])
async def test_raise_multiplies_salary(engine, roster, percent):
    employee = roster.seed_employee(salary=2000.0)
    result = await engine.give_raise(employee.id, percent)
    assert isinstance(result, Ok)
    assert roster.employees[employee.id].salary == pytest.approx(
        2000.0 * (1 + percent / 100),
    )


@pytest.mark.parametrize("percent", [-5.5, -10, 100.5, 1000])
async def test_raise_outside_bounds_rejected(engine, roster, percent):
    employee = roster.seed_employee(salary=2000.0)
    result = await engine.give_raise(employee.id, percent)
    assert isinstance(result, ValidationError)
    assert roster.employees[employee.id].salary == 2000.0
    assert roster.writes == 0


async def test_raise_scenario_minus_five_then_minus_ten(engine, roster):
    employee = roster.seed_employee("Jan", "Kowalski", 500.0)

    assert isinstance(await engine.give_raise(employee.id, -5), Ok)
    assert roster.employees[employee.id].salary == pytest.approx(475.0)

    assert isinstance(await engine.give_raise(employee.id, -10), ValidationError)
    assert roster.employees[employee.id].salary == pytest.approx(475.0)


async def test_raise_requires_employee_id(engine):
    result = await engine.give_raise(None, 10)
    assert result.error_code == "MISSING_EMPLOYEE_ID"


async def test_raise_unknown_employee_rejected(engine):
    result = await engine.give_raise(EmployeeId(9999999), 20.0)
    assert result.error_code == "EMPLOYEE_NOT_FOUND"


# ─── give_promotion ──────────────────────────────────────────────

async def test_promote_worker_to_lead(engine, roster):
    employee = roster.seed_employee(salary=1000.0)
    result = await engine.give_promotion(employee.id)
    assert isinstance(result, Ok)
    stored = roster.employees[employee.id]
    assert stored.level == EmployeeLevel.LEAD
    assert stored.salary == pytest.approx(1050.0)


async def test_promote_manager_to_executive(engine, roster):
    employee = roster.seed_employee(salary=1000.0, level=EmployeeLevel.MANAGER)
    await engine.give_promotion(employee.id)
    stored = roster.employees[employee.id]
    assert stored.level == EmployeeLevel.EXECUTIVE
    assert stored.salary == pytest.approx(1030.0)


@pytest.mark.parametrize("level", [EmployeeLevel.SALES, EmployeeLevel.ACCOUNTING, EmployeeLevel.LEAD])
async def test_promote_to_manager(engine, roster, level):
    employee = roster.seed_employee(salary=1000.0, level=level)
    await engine.give_promotion(employee.id)
    stored = roster.employees[employee.id]
    assert stored.level == EmployeeLevel.MANAGER
    assert stored.salary == pytest.approx(1050.0)


async def test_promotion_is_a_single_write(engine, roster):
    employee = roster.seed_employee()
    await engine.give_promotion(employee.id)
    assert roster.writes == 1


@pytest.mark.parametrize("level", [EmployeeLevel.EXECUTIVE, EmployeeLevel.INDEPENDENT])
async def test_promote_terminal_level_rejected(engine, roster, level):
    employee = roster.seed_employee(salary=1000.0, level=level)
    result = await engine.give_promotion(employee.id)
    assert result.error_code == "TERMINAL_LEVEL"
    assert roster.employees[employee.id] == employee
    assert roster.writes == 0


async def test_promote_unknown_employee_rejected(engine):
    assert (await engine.give_promotion(EmployeeId(5))).error_code == "EMPLOYEE_NOT_FOUND"
    assert (await engine.give_promotion(None)).error_code == "EMPLOYEE_NOT_FOUND"


async def test_promotion_cannot_create_second_lead(engine, roster):
    roster.seed_employee("Lead", level=EmployeeLevel.LEAD, team_name="Alpha")
    worker = roster.seed_employee("Worker", team_name="Alpha")
    result = await engine.give_promotion(worker.id)
    assert result.error_code == "TEAM_HAS_LEAD"
    assert roster.employees[worker.id] == worker


async def test_promotion_cannot_create_second_manager(engine, roster):
    roster.seed_employee("Boss", level=EmployeeLevel.MANAGER, team_name="Alpha")
    sales = roster.seed_employee("Sales", level=EmployeeLevel.SALES, team_name="Alpha")
    result = await engine.give_promotion(sales.id)
    assert result.error_code == "TEAM_HAS_MANAGER"


async def test_team_lead_promoted_to_manager_frees_lead_slot(engine, roster):
    lead = roster.seed_employee("Lead", level=EmployeeLevel.LEAD, team_name="Alpha")
    worker = roster.seed_employee("Worker", team_name="Alpha")
    assert isinstance(await engine.give_promotion(lead.id), Ok)
    assert isinstance(await engine.give_promotion(worker.id), Ok)
    snapshot = (await engine.team_info("Alpha")).value
    assert snapshot.manager.first_name == "Lead"
    assert snapshot.lead.first_name == "Worker"


async def test_promotion_locks_team_before_members(engine, roster):
    roster.seed_employee("Lead", level=EmployeeLevel.LEAD, team_name="Alpha")
    worker = roster.seed_employee("Worker", team_name="Alpha")
    assert (await engine.give_promotion(worker.id)).error_code == "TEAM_HAS_LEAD"
    assert roster.locks[:2] == [("team", "Alpha"), ("employee", worker.id)]
    assert roster.team_locked_first()


# ─── salaries ────────────────────────────────────────────────────

async def test_salaries_by_level(engine, roster):
    roster.seed_employee(salary=500.0)
    roster.seed_employee(salary=2500.0)
    roster.seed_employee(salary=5000.0, level=EmployeeLevel.MANAGER)
    assert await engine.salaries(EmployeeLevel.WORKER) == Ok(3000.0)
    assert await engine.salaries(EmployeeLevel.MANAGER) == Ok(5000.0)
    assert await engine.salaries(EmployeeLevel.EXECUTIVE) == Ok(0.0)


async def test_salaries_requires_level(engine):
    assert (await engine.salaries(None)).error_code == "MISSING_LEVEL"


async def test_summarize_salaries(engine, roster):
    assert await engine.summarize_salaries() == Ok(0.0)
    roster.seed_employee(salary=500.0)
    roster.seed_employee(salary=5000.0, level=EmployeeLevel.MANAGER)
    assert await engine.summarize_salaries() == Ok(5500.0)
