"""Team Schemas — team creation, membership and snapshot models.

Invariants:
    - TeamSnapshotResponse mirrors core TeamSnapshot: members, lead, manager
    - lead/manager are null when the team has no member at that level
"""

from pydantic import BaseModel, Field

from workforce.core.domain_types import MemberSummary, TeamSnapshot


class TeamCreate(BaseModel):
    """Team creation request. Blank names are rejected by the rule layer."""
    name: str | None = Field(None, max_length=100)


class TeamMemberAdd(BaseModel):
    """Add-member request."""
    employee_id: int


class MemberSummaryResponse(BaseModel):
    name: str
    surname: str
    salary: float

    @classmethod
    def from_domain(cls, member: MemberSummary | None) -> "MemberSummaryResponse | None":
        if member is None:
            return None
        return cls(
            name=member.first_name, surname=member.last_name, salary=member.salary,
        )


class TeamSnapshotResponse(BaseModel):
    team_name: str
    members: list[MemberSummaryResponse]
    lead: MemberSummaryResponse | None = None
    manager: MemberSummaryResponse | None = None

    @classmethod
    def from_domain(cls, snapshot: TeamSnapshot) -> "TeamSnapshotResponse":
        return cls(
            team_name=snapshot.team_name,
            members=[MemberSummaryResponse.from_domain(m) for m in snapshot.members],
            lead=MemberSummaryResponse.from_domain(snapshot.lead),
            manager=MemberSummaryResponse.from_domain(snapshot.manager),
        )


class TeamResponse(BaseModel):
    name: str
    member_ids: list[int]
