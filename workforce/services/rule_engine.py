"""Rule Engine — single entry point for every workforce operation.

Invariants:
    - Stateless: all state lives in Roster-held records
    - Every operation returns Result (Ok | ValidationError), never raises on rule failure
    - Roster injected explicitly — no global repositories

Design Decisions:
    - Facade over three handler groups: callers see one surface, handlers stay small
    - Explicit delegation over __getattr__ magic: the full operation list is greppable
"""

from workforce.core.domain_types import (
    Employee, EmployeeId, EmployeeLevel, Team, TeamSnapshot,
)
from workforce.core.outcome import Result
from workforce.core.repository_protocols import Roster
from workforce.services.handle_compensation import CompensationHandlers
from workforce.services.handle_staffing import StaffingHandlers
from workforce.services.handle_teams import TeamHandlers


class RuleEngine:
    """Validates and applies hiring, team, raise and promotion operations."""

    def __init__(self, roster: Roster):
        self.roster = roster
        self._staffing = StaffingHandlers(roster)
        self._teams = TeamHandlers(roster)
        self._compensation = CompensationHandlers(roster)

    # ─── Staffing ────────────────────────────────────────────────

    async def hire(
        self, name: str | None, surname: str | None, salary: float | None,
    ) -> Result[Employee]:
        return await self._staffing.hire(name, surname, salary)

    async def fire(self, employee_id: EmployeeId | None) -> Result[None]:
        return await self._staffing.fire(employee_id)

    async def find_employee(self, employee_id: EmployeeId | None) -> Result[Employee]:
        return await self._staffing.find_employee(employee_id)

    async def list_employees(
        self, level: EmployeeLevel | None = None,
    ) -> Result[list[Employee]]:
        return await self._staffing.list_employees(level)

    async def list_employees_by_salary(
        self, lower: float | None = None, upper: float | None = None,
    ) -> Result[list[Employee]]:
        return await self._staffing.list_employees_by_salary(lower, upper)

    # ─── Teams ───────────────────────────────────────────────────

    async def create_team(self, name: str | None) -> Result[Team]:
        return await self._teams.create_team(name)

    async def remove_team(self, name: str | None) -> Result[None]:
        return await self._teams.remove_team(name)

    async def list_teams(self) -> Result[list[str]]:
        return await self._teams.list_teams()

    async def add_employee_to_team(
        self, employee_id: EmployeeId | None, team_name: str | None,
    ) -> Result[Team]:
        return await self._teams.add_employee_to_team(employee_id, team_name)

    async def remove_employee_from_team(
        self, employee_id: EmployeeId | None,
    ) -> Result[None]:
        return await self._teams.remove_employee_from_team(employee_id)

    async def team_info(self, team_name: str | None) -> Result[TeamSnapshot]:
        return await self._teams.team_info(team_name)

    # ─── Compensation ────────────────────────────────────────────

    async def give_raise(
        self, employee_id: EmployeeId | None, percent: float | None,
    ) -> Result[Employee]:
        return await self._compensation.give_raise(employee_id, percent)

    async def give_promotion(self, employee_id: EmployeeId | None) -> Result[Employee]:
        return await self._compensation.give_promotion(employee_id)

    async def salaries(self, level: EmployeeLevel | None) -> Result[float]:
        return await self._compensation.salaries(level)

    async def summarize_salaries(self) -> Result[float]:
        return await self._compensation.summarize_salaries()
