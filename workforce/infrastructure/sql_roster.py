"""SQL Roster — Roster implementation over a SQLAlchemy AsyncSession.

Invariants:
    - Converts ORM rows to frozen core records at the boundary; ORM objects never leak
    - Never commits: the owning request commits once the rule layer returns Ok
    - Reads used for read-modify-write take row locks (SELECT ... FOR UPDATE);
      for_update=False reads lock nothing
    - Ids outside the employees.id column range (int4, from 1) are never found
    - save_team makes employees.team_name agree with Team.member_ids

Design Decisions:
    - Membership lives on employees.team_name, so Team.member_ids is a query result
    - Row locks are ignored by SQLite (tests) and honored by PostgreSQL (production)
    - Bulk UPDATE/DELETE statements with synchronize_session keep the identity map honest
"""

import math

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from workforce.core.domain_types import (
    Employee, EmployeeId, EmployeeLevel, Team, TeamName,
)
from workforce.models.employee import EmployeeModel
from workforce.models.team import TeamModel

# employees.id is a 32-bit autoincrement key
MIN_EMPLOYEE_ID = 1
MAX_EMPLOYEE_ID = 2**31 - 1


def _to_employee(row: EmployeeModel) -> Employee:
    return Employee(
        id=EmployeeId(row.id),
        first_name=row.first_name,
        last_name=row.last_name,
        salary=row.salary,
        level=EmployeeLevel(row.level),
        team_name=TeamName(row.team_name) if row.team_name is not None else None,
    )


class SqlRoster:
    """Employee and team persistence backed by the relational schema."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Employees ───────────────────────────────────────────────

    async def find_employee(
        self, employee_id: EmployeeId, for_update: bool = True,
    ) -> Employee | None:
        if not MIN_EMPLOYEE_ID <= employee_id <= MAX_EMPLOYEE_ID:
            return None
        query = select(EmployeeModel).where(EmployeeModel.id == employee_id)
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(
            query.execution_options(populate_existing=True),
        )
        row = result.scalar_one_or_none()
        return _to_employee(row) if row else None

    async def list_employees(
        self, level: EmployeeLevel | None = None,
    ) -> list[Employee]:
        query = select(EmployeeModel).order_by(EmployeeModel.id)
        if level is not None:
            query = query.where(EmployeeModel.level == level.value)
        result = await self.db.execute(
            query.execution_options(populate_existing=True),
        )
        return [_to_employee(row) for row in result.scalars().all()]

    async def list_employees_by_salary(
        self, lower: float, upper: float,
    ) -> list[Employee]:
        query = (
            select(EmployeeModel)
            .where(EmployeeModel.salary > lower)
            .order_by(EmployeeModel.id)
        )
        if math.isfinite(upper):
            query = query.where(EmployeeModel.salary < upper)
        result = await self.db.execute(
            query.execution_options(populate_existing=True),
        )
        return [_to_employee(row) for row in result.scalars().all()]

    async def save_employee(self, employee: Employee) -> Employee:
        """Insert when id is None, otherwise update the existing row."""
        if employee.id is None:
            row = EmployeeModel(
                first_name=employee.first_name,
                last_name=employee.last_name,
                salary=employee.salary,
                level=employee.level.value,
                team_name=employee.team_name,
            )
            self.db.add(row)
            await self.db.flush()
            return _to_employee(row)

        await self.db.execute(
            update(EmployeeModel)
            .where(EmployeeModel.id == employee.id)
            .values(
                first_name=employee.first_name,
                last_name=employee.last_name,
                salary=employee.salary,
                level=employee.level.value,
                team_name=employee.team_name,
            ),
        )
        return employee

    async def delete_employee(self, employee: Employee) -> None:
        await self.db.execute(
            delete(EmployeeModel).where(EmployeeModel.id == employee.id),
        )

    # ─── Teams ───────────────────────────────────────────────────

    async def find_team_by_name(
        self, name: TeamName, for_update: bool = True,
    ) -> Team | None:
        query = select(TeamModel.name).where(TeamModel.name == name)
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        found = result.scalar_one_or_none()
        if found is None:
            return None
        return Team(name=TeamName(found), member_ids=await self._member_ids(found))

    async def list_teams(self) -> list[Team]:
        result = await self.db.execute(
            select(TeamModel.name, EmployeeModel.id)
            .outerjoin(EmployeeModel, EmployeeModel.team_name == TeamModel.name)
            .order_by(TeamModel.name),
        )
        members: dict[str, set[EmployeeId]] = {}
        for team_name, employee_id in result.all():
            ids = members.setdefault(team_name, set())
            if employee_id is not None:
                ids.add(EmployeeId(employee_id))
        return [
            Team(name=TeamName(name), member_ids=frozenset(ids))
            for name, ids in members.items()
        ]

    async def save_team(self, team: Team) -> Team:
        """Upsert the team row and align employees.team_name with member_ids."""
        exists = await self.db.scalar(
            select(func.count()).select_from(TeamModel).where(TeamModel.name == team.name),
        )
        if not exists:
            self.db.add(TeamModel(name=team.name))
            await self.db.flush()

        member_ids = sorted(team.member_ids)
        departed = [EmployeeModel.team_name == team.name]
        if member_ids:
            departed.append(EmployeeModel.id.not_in(member_ids))
        await self.db.execute(
            update(EmployeeModel).where(*departed).values(team_name=None),
        )
        if member_ids:
            await self.db.execute(
                update(EmployeeModel)
                .where(EmployeeModel.id.in_(member_ids))
                .values(team_name=team.name),
            )
        return team

    async def delete_team(self, team: Team) -> None:
        await self.db.execute(
            update(EmployeeModel)
            .where(EmployeeModel.team_name == team.name)
            .values(team_name=None),
        )
        await self.db.execute(delete(TeamModel).where(TeamModel.name == team.name))

    async def _member_ids(self, name: str) -> frozenset[EmployeeId]:
        result = await self.db.execute(
            select(EmployeeModel.id).where(EmployeeModel.team_name == name),
        )
        return frozenset(EmployeeId(i) for i in result.scalars().all())
