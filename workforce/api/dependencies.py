"""Route Dependencies — RuleEngine wiring and Result unwrapping.

Invariants:
    - One AsyncSession per request; the RuleEngine and the route share it
    - unwrap() is the ONLY place a ValidationError becomes an exception
"""

from typing import TypeVar

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from workforce.core.errors import ErrorContext
from workforce.core.outcome import Result, is_ok
from workforce.infrastructure.database import get_db
from workforce.infrastructure.sql_roster import SqlRoster
from workforce.services.rule_engine import RuleEngine

T = TypeVar("T")


async def get_rule_engine(db: AsyncSession = Depends(get_db)) -> RuleEngine:
    return RuleEngine(SqlRoster(db))


def unwrap(
    result: Result[T],
    operation: str,
    employee_id: int | None = None,
    team_name: str | None = None,
) -> T:
    """Return the Ok value or raise InvalidOperationError (HTTP 400)."""
    if not is_ok(result):
        raise result.to_exception(ErrorContext(
            employee_id=employee_id, team_name=team_name, operation=operation,
        ))
    return result.value
