"""Team Routes — team lifecycle, membership and team info.

Invariants:
    - Every rule failure surfaces as 400 INVALID_OPERATION via unwrap()
    - Team names are path segments; the RuleEngine decides whether they exist
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from workforce.api.dependencies import get_rule_engine, unwrap
from workforce.core.domain_types import EmployeeId
from workforce.infrastructure.database import get_db
from workforce.schemas.envelope import ResponseMessage
from workforce.schemas.team import (
    TeamCreate, TeamMemberAdd, TeamResponse, TeamSnapshotResponse,
)
from workforce.services.rule_engine import RuleEngine

router = APIRouter(prefix="/api/v1/teams", tags=["teams"])


@router.post(
    "", response_model=ResponseMessage[TeamResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_team(
    body: TeamCreate,
    db: AsyncSession = Depends(get_db),
    engine: RuleEngine = Depends(get_rule_engine),
):
    """Create an empty team with a unique name."""
    team = unwrap(await engine.create_team(body.name), "create_team", team_name=body.name)
    await db.commit()
    return ResponseMessage(body=TeamResponse(name=team.name, member_ids=[]))


@router.get("", response_model=ResponseMessage[list[str]])
async def list_teams(engine: RuleEngine = Depends(get_rule_engine)):
    return ResponseMessage(body=unwrap(await engine.list_teams(), "list_teams"))


@router.get("/{team_name}", response_model=ResponseMessage[TeamSnapshotResponse])
async def team_info(
    team_name: str, engine: RuleEngine = Depends(get_rule_engine),
):
    """Members, lead and manager of one team."""
    snapshot = unwrap(
        await engine.team_info(team_name), "team_info", team_name=team_name,
    )
    return ResponseMessage(body=TeamSnapshotResponse.from_domain(snapshot))


@router.delete("/{team_name}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_team(
    team_name: str,
    db: AsyncSession = Depends(get_db),
    engine: RuleEngine = Depends(get_rule_engine),
):
    """Delete a team; its members become unassigned."""
    unwrap(await engine.remove_team(team_name), "remove_team", team_name=team_name)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{team_name}/members", response_model=ResponseMessage[TeamResponse])
async def add_employee_to_team(
    team_name: str,
    body: TeamMemberAdd,
    db: AsyncSession = Depends(get_db),
    engine: RuleEngine = Depends(get_rule_engine),
):
    team = unwrap(
        await engine.add_employee_to_team(EmployeeId(body.employee_id), team_name),
        "add_employee_to_team", employee_id=body.employee_id, team_name=team_name,
    )
    await db.commit()
    return ResponseMessage(
        body=TeamResponse(name=team.name, member_ids=sorted(team.member_ids)),
    )
