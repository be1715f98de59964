"""Team Composition Enforcement — membership exclusivity, size cap, unique roles.

Invariants:
    - An employee belongs to at most one team
    - A team has at most MAX_TEAM_SIZE members
    - At most one member per level in UNIQUE_TEAM_LEVELS (LEAD, MANAGER)
    - Team names are unique and non-blank
    - All validators are PURE: they take records already loaded by the shell

Design Decisions:
    - Members passed as a list of Employee records, not ids: the rule needs levels,
      and loading is the shell's job
    - A level check asks "would this member create a duplicate", so the same
      validator guards both team assignment and promotion of a current member
"""

from collections.abc import Iterable

from workforce.core.domain_types import Employee, EmployeeLevel, Team
from workforce.core.outcome import ValidationError


MAX_TEAM_SIZE: int = 6
UNIQUE_TEAM_LEVELS: frozenset[EmployeeLevel] = frozenset({
    EmployeeLevel.LEAD,
    EmployeeLevel.MANAGER,
})


def is_blank(name: str | None) -> bool:
    return name is None or not name.strip()


def validate_new_team_name(
    name: str | None, existing: Team | None,
) -> ValidationError | None:
    """Name must be non-blank and not taken."""
    if is_blank(name):
        return ValidationError("INVALID_TEAM_NAME", "Team name is required.")
    if existing is not None:
        return ValidationError(
            "TEAM_ALREADY_EXISTS", f"Team '{name}' already exists.",
        )
    return None


def find_member_of_level(
    members: Iterable[Employee], level: EmployeeLevel,
) -> Employee | None:
    """First member (lowest id) holding the given level."""
    ordered = sorted(members, key=lambda e: e.id or 0)
    return next((m for m in ordered if m.level == level), None)


def validate_unique_level(
    level: EmployeeLevel, team: Team, others: Iterable[Employee],
) -> ValidationError | None:
    """Reject if `level` is unique per team and already held by one of `others`."""
    if level not in UNIQUE_TEAM_LEVELS:
        return None
    if find_member_of_level(others, level) is not None:
        return ValidationError(
            f"TEAM_HAS_{level.name}",
            f"Team '{team.name}' already has a member with level '{level.value}'.",
        )
    return None


def validate_team_addition(
    employee: Employee, team: Team, members: list[Employee],
) -> ValidationError | None:
    """Check membership, size and composition for adding `employee` to `team`."""
    if employee.team_name is not None:
        return ValidationError(
            "ALREADY_IN_TEAM",
            f"Employee {employee.id} already belongs to team '{employee.team_name}'.",
        )
    if team.size >= MAX_TEAM_SIZE:
        return ValidationError(
            "TEAM_FULL",
            f"Team '{team.name}' is full ({team.size}/{MAX_TEAM_SIZE}).",
        )
    return validate_unique_level(employee.level, team, members)
