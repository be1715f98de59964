"""Boundary Protocols — the Roster contract between the rule layer and storage.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - All IO operations accessed through the Roster Protocol
    - Implementations provided by the shell via dependency injection
    - Only single-record atomicity is assumed of implementations

Design Decisions:
    - Protocol over ABC: structural subtyping, the test fake needs no base class
    - Async in Protocol: implementations do IO; core pure functions that reason
      about the returned records are never async themselves
    - list_employees_by_salary takes resolved bounds; defaulting lives in core/enforce_salary
    - find_* lock the row by default (read-modify-write); plain reads pass for_update=False
    - Lock order: a team row before any employee row, employees by ascending id
"""

from typing import Protocol

from workforce.core.domain_types import (
    Employee, EmployeeId, EmployeeLevel, Team, TeamName,
)


class Roster(Protocol):
    """Contract for employee and team persistence — implemented by shell."""

    async def find_employee(
        self, employee_id: EmployeeId, for_update: bool = True,
    ) -> Employee | None: ...
    async def list_employees(
        self, level: EmployeeLevel | None = None,
    ) -> list[Employee]: ...
    async def list_employees_by_salary(
        self, lower: float, upper: float,
    ) -> list[Employee]: ...
    async def save_employee(self, employee: Employee) -> Employee: ...
    async def delete_employee(self, employee: Employee) -> None: ...

    async def find_team_by_name(
        self, name: TeamName, for_update: bool = True,
    ) -> Team | None: ...
    async def list_teams(self) -> list[Team]: ...
    async def save_team(self, team: Team) -> Team: ...
    async def delete_team(self, team: Team) -> None: ...
