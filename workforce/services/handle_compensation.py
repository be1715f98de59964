"""Compensation Handlers — give_raise, give_promotion, payroll sums.

Invariants:
    - Raise bounds checked before the employee is even looked up
    - Promotion writes level and salary in ONE save_employee call (no partial state)
    - A promotion never creates a second LEAD or MANAGER in the employee's team
    - salaries() requires a level; summarize_salaries() covers everyone

Design Decisions:
    - Transition logic lives in core/promotion_table.py; this module only loads,
      checks team composition, and persists
"""

import logging
from dataclasses import replace

from workforce.core.domain_types import Employee, EmployeeId, EmployeeLevel, Team
from workforce.core.enforce_salary import (
    apply_raise, sum_salaries, validate_raise_percent,
)
from workforce.core.enforce_team import validate_unique_level
from workforce.core.outcome import Ok, Result, ValidationError, is_ok
from workforce.core.promotion_table import plan_promotion
from workforce.core.repository_protocols import Roster
from workforce.services.handle_teams import load_members, lock_with_team, reject

logger = logging.getLogger(__name__)


class CompensationHandlers:
    """Salary and level handlers."""

    def __init__(self, roster: Roster):
        self.roster = roster

    async def give_raise(
        self, employee_id: EmployeeId | None, percent: float | None,
    ) -> Result[Employee]:
        """Multiply salary by (1 + percent/100). Percent must be in [-5, 100]."""
        if employee_id is None:
            return reject(
                "give_raise",
                ValidationError("MISSING_EMPLOYEE_ID", "Employee id is required."),
            )
        if error := validate_raise_percent(percent):
            return reject("give_raise", error, employee_id=employee_id)

        employee = await self.roster.find_employee(employee_id)
        if employee is None:
            return reject(
                "give_raise", _employee_not_found(employee_id),
                employee_id=employee_id,
            )

        employee = await self.roster.save_employee(
            replace(employee, salary=apply_raise(employee.salary, percent)),
        )
        logger.info(
            f"Raise of {percent}% applied",
            extra={"employee_id": employee.id},
        )
        return Ok(employee)

    async def give_promotion(
        self, employee_id: EmployeeId | None,
    ) -> Result[Employee]:
        """Move the employee one step up the promotion table, with its raise."""
        employee, team = None, None
        if employee_id is not None:
            employee, team = await lock_with_team(self.roster, employee_id)
        if employee is None:
            return reject(
                "give_promotion", _employee_not_found(employee_id),
                employee_id=employee_id,
            )

        planned = plan_promotion(employee)
        if not is_ok(planned):
            return reject("give_promotion", planned, employee_id=employee_id)
        promoted = planned.value

        if error := await self._check_team_composition(promoted, team):
            return reject("give_promotion", error, employee_id=employee_id)

        promoted = await self.roster.save_employee(promoted)
        logger.info(
            f"Promoted {employee.level.value} -> {promoted.level.value}",
            extra={"employee_id": promoted.id, "team_name": promoted.team_name},
        )
        return Ok(promoted)

    async def salaries(self, level: EmployeeLevel | None) -> Result[float]:
        """Sum of salaries at `level`. The level is mandatory here."""
        if level is None:
            return reject(
                "salaries",
                ValidationError("MISSING_LEVEL", "Employee level is required."),
            )
        return Ok(sum_salaries(await self.roster.list_employees(level)))

    async def summarize_salaries(self) -> Result[float]:
        return Ok(sum_salaries(await self.roster.list_employees(None)))

    async def _check_team_composition(
        self, promoted: Employee, team: Team | None,
    ) -> ValidationError | None:
        if promoted.team_name is None:
            return None
        if team is None or team.name != promoted.team_name:
            team = await self.roster.find_team_by_name(promoted.team_name)
        if team is None:
            return None
        others = [
            m for m in await load_members(self.roster, team) if m.id != promoted.id
        ]
        return validate_unique_level(promoted.level, team, others)


def _employee_not_found(employee_id: EmployeeId | None) -> ValidationError:
    return ValidationError(
        "EMPLOYEE_NOT_FOUND", f"Employee {employee_id} does not exist.",
    )
