"""Staffing Handlers — hire, fire, employee lookup and listings.

Invariants:
    - hire validates names and salary before the first Roster write
    - New hires start at EmployeeLevel.WORKER with no team
    - fire on an absent id is a silent no-op; a fired member is detached first
    - Salary range listing resolves absent bounds via core/enforce_salary

Design Decisions:
    - Listings return Ok even when empty: "no match" is not a rule violation
"""

import logging

from workforce.core.domain_types import Employee, EmployeeId, EmployeeLevel
from workforce.core.enforce_salary import (
    resolve_salary_bounds, validate_salary, within_salary_range,
)
from workforce.core.enforce_team import is_blank
from workforce.core.outcome import Ok, Result, ValidationError
from workforce.core.repository_protocols import Roster
from workforce.services.handle_teams import detach_from_team, lock_with_team, reject

logger = logging.getLogger(__name__)


class StaffingHandlers:
    """Employee lifecycle and lookup handlers."""

    def __init__(self, roster: Roster):
        self.roster = roster

    async def hire(
        self, name: str | None, surname: str | None, salary: float | None,
    ) -> Result[Employee]:
        """Add a new WORKER-level employee to the company."""
        if is_blank(name) or is_blank(surname):
            return reject(
                "hire",
                ValidationError(
                    "MISSING_NAME", "Both name and surname are required.",
                ),
            )
        if error := validate_salary(salary):
            return reject("hire", error)

        employee = await self.roster.save_employee(Employee(
            first_name=name.strip(),
            last_name=surname.strip(),
            salary=salary,
            level=EmployeeLevel.WORKER,
        ))
        logger.info("Employee hired", extra={"employee_id": employee.id})
        return Ok(employee)

    async def fire(self, employee_id: EmployeeId | None) -> Result[None]:
        """Remove the employee if present. Absent id is not an error."""
        if employee_id is None:
            return Ok(None)
        employee, team = await lock_with_team(self.roster, employee_id)
        if employee is None:
            return Ok(None)

        employee = await detach_from_team(self.roster, employee, team)
        await self.roster.delete_employee(employee)
        logger.info("Employee fired", extra={"employee_id": employee.id})
        return Ok(None)

    async def find_employee(
        self, employee_id: EmployeeId | None,
    ) -> Result[Employee]:
        employee = None if employee_id is None else await self.roster.find_employee(
            employee_id, for_update=False,
        )
        if employee is None:
            return ValidationError(
                "EMPLOYEE_NOT_FOUND", f"Employee {employee_id} does not exist.",
            )
        return Ok(employee)

    async def list_employees(
        self, level: EmployeeLevel | None = None,
    ) -> Result[list[Employee]]:
        """All employees, or only those at `level` when given."""
        return Ok(await self.roster.list_employees(level))

    async def list_employees_by_salary(
        self, lower: float | None = None, upper: float | None = None,
    ) -> Result[list[Employee]]:
        """Employees with lower < salary < upper; absent bounds are 0 and +inf."""
        lower, upper = resolve_salary_bounds(lower, upper)
        employees = await self.roster.list_employees_by_salary(lower, upper)
        return Ok([e for e in employees if within_salary_range(e.salary, lower, upper)])
