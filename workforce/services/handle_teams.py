"""Team Handlers — create_team, remove_team, add/remove members, team_info.

Invariants:
    - Every mutation calls a core/enforce_team validator (pure) before any Roster write
    - Follows impureim sandwich: read records → pure validate → write records
    - Membership writes always touch both sides: Team.member_ids and Employee.team_name
    - Absent employee or unassigned employee on removal is a silent no-op
    - Rows are locked team first, then employees by ascending id
    - Team names are stored and looked up without surrounding whitespace

Design Decisions:
    - detach_from_team / load_members / lock_with_team are module functions:
      staffing (fire) and compensation (promotion) need them too
    - load_members reads sequentially: one AsyncSession never runs concurrent queries
    - remove_team detaches members before deleting the team (no dangling team_name)
    - team_info is read-only and takes no row locks
"""

import logging
from dataclasses import replace

from workforce.core.domain_types import (
    Employee, EmployeeId, EmployeeLevel, MemberSummary, Team, TeamName, TeamSnapshot,
)
from workforce.core.enforce_team import (
    find_member_of_level, is_blank, validate_new_team_name, validate_team_addition,
)
from workforce.core.outcome import Ok, Result, ValidationError
from workforce.core.repository_protocols import Roster

logger = logging.getLogger(__name__)


def clean_team_name(name: str | None) -> TeamName | None:
    return None if name is None else TeamName(name.strip())


async def load_members(
    roster: Roster, team: Team, for_update: bool = True,
) -> list[Employee]:
    """Load the member records of `team`, ordered by employee id."""
    members = []
    for member_id in sorted(team.member_ids):
        employee = await roster.find_employee(member_id, for_update=for_update)
        if employee is not None:
            members.append(employee)
    return members


async def lock_with_team(
    roster: Roster, employee_id: EmployeeId,
) -> tuple[Employee | None, Team | None]:
    """Lock an employee together with its current team, team row first.

    The team is found through an unlocked read. If the employee changed teams
    before its own row was locked, the returned team no longer matches
    employee.team_name; detach_from_team then falls back to a fresh lookup.
    """
    peek = await roster.find_employee(employee_id, for_update=False)
    if peek is None:
        return None, None
    team = None
    if peek.team_name is not None:
        team = await roster.find_team_by_name(peek.team_name)
    return await roster.find_employee(employee_id), team


async def detach_from_team(
    roster: Roster, employee: Employee, team: Team | None = None,
) -> Employee:
    """Remove `employee` from its team on both sides. No-op when unassigned."""
    if employee.team_name is None:
        return employee
    if team is None or team.name != employee.team_name:
        team = await roster.find_team_by_name(employee.team_name)
    if team is not None:
        await roster.save_team(
            replace(team, member_ids=team.member_ids - {employee.id}),
        )
    return await roster.save_employee(replace(employee, team_name=None))


def reject(operation: str, error: ValidationError, **extra) -> ValidationError:
    """Log a rule rejection and hand the error back to the caller."""
    logger.info(
        f"{operation} rejected: {error.message}",
        extra={"operation": operation, "error_code": error.error_code, **extra},
    )
    return error


class TeamHandlers:
    """Team lifecycle and composition handlers — invariant-checked."""

    def __init__(self, roster: Roster):
        self.roster = roster

    async def create_team(self, name: str | None) -> Result[Team]:
        """Create an empty team. Name must be non-blank and unique."""
        name = clean_team_name(name)
        existing = None if is_blank(name) else await self.roster.find_team_by_name(name)
        if error := validate_new_team_name(name, existing):
            return reject("create_team", error, team_name=name)

        team = await self.roster.save_team(Team(name=name))
        logger.info("Team created", extra={"team_name": team.name})
        return Ok(team)

    async def remove_team(self, name: str | None) -> Result[None]:
        """Delete a team after detaching all of its members."""
        name = clean_team_name(name)
        team = None if name is None else await self.roster.find_team_by_name(name)
        if team is None:
            return reject(
                "remove_team",
                ValidationError("TEAM_NOT_FOUND", f"Team '{name}' does not exist."),
                team_name=name,
            )

        for member in await load_members(self.roster, team):
            await self.roster.save_employee(replace(member, team_name=None))
        await self.roster.delete_team(replace(team, member_ids=frozenset()))
        logger.info(
            f"Team removed, {team.size} member(s) detached",
            extra={"team_name": team.name},
        )
        return Ok(None)

    async def list_teams(self) -> Result[list[str]]:
        teams = await self.roster.list_teams()
        return Ok(sorted(t.name for t in teams))

    async def add_employee_to_team(
        self, employee_id: EmployeeId | None, team_name: str | None,
    ) -> Result[Team]:
        """Assign an employee to a team. Checks membership, size and composition."""
        team_name = clean_team_name(team_name)
        team = None if team_name is None else await self.roster.find_team_by_name(
            team_name,
        )
        employee = None
        if team is not None and employee_id is not None:
            employee = await self.roster.find_employee(employee_id)
        if employee is None or team is None:
            return reject(
                "add_employee_to_team",
                ValidationError(
                    "NOT_FOUND",
                    f"Employee {employee_id} or team '{team_name}' does not exist.",
                ),
                employee_id=employee_id, team_name=team_name,
            )

        members = await load_members(self.roster, team)
        if error := validate_team_addition(employee, team, members):
            return reject(
                "add_employee_to_team", error,
                employee_id=employee_id, team_name=team_name,
            )

        team = await self.roster.save_team(
            replace(team, member_ids=team.member_ids | {employee.id}),
        )
        await self.roster.save_employee(replace(employee, team_name=team.name))
        logger.info(
            "Employee added to team",
            extra={"employee_id": employee.id, "team_name": team.name},
        )
        return Ok(team)

    async def remove_employee_from_team(
        self, employee_id: EmployeeId | None,
    ) -> Result[None]:
        """Clear an employee's team membership. Silent no-op when not applicable."""
        if employee_id is None:
            return Ok(None)
        employee, team = await lock_with_team(self.roster, employee_id)
        if employee is None or employee.team_name is None:
            return Ok(None)

        await detach_from_team(self.roster, employee, team)
        logger.info(
            "Employee removed from team",
            extra={"employee_id": employee.id, "team_name": employee.team_name},
        )
        return Ok(None)

    async def team_info(self, team_name: str | None) -> Result[TeamSnapshot]:
        """Snapshot of a team: members, current lead and manager."""
        team_name = clean_team_name(team_name)
        team = None if team_name is None else await self.roster.find_team_by_name(
            team_name, for_update=False,
        )
        if team is None:
            return reject(
                "team_info",
                ValidationError(
                    "TEAM_NOT_FOUND", f"Team '{team_name}' does not exist.",
                ),
                team_name=team_name,
            )

        members = await load_members(self.roster, team, for_update=False)
        lead = find_member_of_level(members, EmployeeLevel.LEAD)
        manager = find_member_of_level(members, EmployeeLevel.MANAGER)
        return Ok(TeamSnapshot(
            team_name=team.name,
            members=tuple(MemberSummary.of(m) for m in members),
            lead=MemberSummary.of(lead) if lead else None,
            manager=MemberSummary.of(manager) if manager else None,
        ))
