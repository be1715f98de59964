"""Team Enforcement — pure membership, size, composition and naming checks.

Tests cover:
    - validate_new_team_name: blank names, duplicates
    - validate_team_addition: already in a team, full team, second LEAD/MANAGER
    - validate_team_addition: LEAD joining a team with a MANAGER is fine
    - find_member_of_level picks the lowest id
"""

import pytest

from workforce.core.domain_types import (
    Employee, EmployeeId, EmployeeLevel, Team, TeamName,
)
from workforce.core.enforce_team import (
    MAX_TEAM_SIZE,
    find_member_of_level,
    validate_new_team_name,
    validate_team_addition,
    validate_unique_level,
)


def _emp(i: int, level=EmployeeLevel.WORKER, team_name=None) -> Employee:
    return Employee(f"E{i}", "Test", 1000.0, level, team_name, EmployeeId(i))


def _team(members: list[Employee], name="Alpha") -> Team:
    return Team(TeamName(name), frozenset(m.id for m in members))


# ─── validate_new_team_name ──────────────────────────────────────

@pytest.mark.parametrize("name", [None, "", "   "])
def test_blank_team_name_rejected(name):
    assert validate_new_team_name(name, None).error_code == "INVALID_TEAM_NAME"


def test_duplicate_team_name_rejected():
    existing = Team(TeamName("Alpha"))
    assert validate_new_team_name("Alpha", existing).error_code == "TEAM_ALREADY_EXISTS"


def test_fresh_team_name_accepted():
    assert validate_new_team_name("Alpha", None) is None


# ─── validate_team_addition ──────────────────────────────────────

def test_worker_joins_empty_team():
    assert validate_team_addition(_emp(1), _team([]), []) is None


def test_employee_in_another_team_rejected():
    employee = _emp(1, team_name="Beta")
    error = validate_team_addition(employee, _team([]), [])
    assert error.error_code == "ALREADY_IN_TEAM"


def test_full_team_rejected():
    members = [_emp(i) for i in range(1, MAX_TEAM_SIZE + 1)]
    error = validate_team_addition(_emp(99), _team(members), members)
    assert error.error_code == "TEAM_FULL"


def test_team_of_five_accepts_sixth():
    members = [_emp(i) for i in range(1, MAX_TEAM_SIZE)]
    assert validate_team_addition(_emp(99), _team(members), members) is None


def test_second_lead_rejected():
    members = [_emp(1, EmployeeLevel.LEAD)]
    error = validate_team_addition(
        _emp(2, EmployeeLevel.LEAD), _team(members), members,
    )
    assert error.error_code == "TEAM_HAS_LEAD"


def test_second_manager_rejected():
    members = [_emp(1, EmployeeLevel.MANAGER)]
    error = validate_team_addition(
        _emp(2, EmployeeLevel.MANAGER), _team(members), members,
    )
    assert error.error_code == "TEAM_HAS_MANAGER"


def test_lead_joins_team_with_manager():
    members = [_emp(1, EmployeeLevel.MANAGER)]
    assert validate_team_addition(
        _emp(2, EmployeeLevel.LEAD), _team(members), members,
    ) is None


def test_worker_joins_team_with_lead_and_manager():
    members = [_emp(1, EmployeeLevel.LEAD), _emp(2, EmployeeLevel.MANAGER)]
    assert validate_team_addition(_emp(3), _team(members), members) is None


def test_unique_level_ignores_non_unique_levels():
    members = [_emp(1, EmployeeLevel.SALES)]
    assert validate_unique_level(EmployeeLevel.SALES, _team(members), members) is None


# ─── find_member_of_level ────────────────────────────────────────

def test_find_member_of_level_returns_lowest_id():
    members = [_emp(5, EmployeeLevel.LEAD), _emp(2, EmployeeLevel.LEAD)]
    assert find_member_of_level(members, EmployeeLevel.LEAD).id == 2


def test_find_member_of_level_none_when_absent():
    assert find_member_of_level([_emp(1)], EmployeeLevel.MANAGER) is None
