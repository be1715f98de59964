"""Domain Types — employee/team records and the level enumeration.

Invariants:
    - EmployeeId wraps int — assigned by the Roster on first save, stable afterwards
    - Employee.team_name is a lookup key into Team, never an owning reference
    - Team owns member_ids; membership changes update both sides together
    - Records are frozen: every change produces a new record via dataclasses.replace

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - frozen dataclasses: validation can never leave a half-mutated record behind
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", int)
TeamName = NewType("TeamName", str)


# ─── Enums ───────────────────────────────────────────────────────

class EmployeeLevel(str, Enum):
    """Seniority classification. Declaration order is seniority order."""
    WORKER = "worker"
    LEAD = "lead"
    SALES = "sales"
    ACCOUNTING = "accounting"
    MANAGER = "manager"
    EXECUTIVE = "executive"
    INDEPENDENT = "independent"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Employee:
    """Employee record as seen by the rule layer."""
    first_name: str
    last_name: str
    salary: float
    level: EmployeeLevel = EmployeeLevel.WORKER
    team_name: TeamName | None = None
    id: EmployeeId | None = None


@dataclass(frozen=True)
class Team:
    """Team record — name is the primary identity."""
    name: TeamName
    member_ids: frozenset[EmployeeId] = field(default_factory=frozenset)

    @property
    def size(self) -> int:
        return len(self.member_ids)


@dataclass(frozen=True)
class MemberSummary:
    """Public projection of a team member (name, surname, salary)."""
    first_name: str
    last_name: str
    salary: float

    @classmethod
    def of(cls, employee: Employee) -> "MemberSummary":
        return cls(employee.first_name, employee.last_name, employee.salary)


@dataclass(frozen=True)
class TeamSnapshot:
    """Read model returned by team_info."""
    team_name: TeamName
    members: tuple[MemberSummary, ...]
    lead: MemberSummary | None
    manager: MemberSummary | None
