"""Salary Routes — payroll sums per level and company-wide.

Invariants:
    - GET /salaries requires ?level= (rule layer rejects a missing level with 400)
    - GET /salaries/total never fails
"""

from fastapi import APIRouter, Depends, Query

from workforce.api.dependencies import get_rule_engine, unwrap
from workforce.core.domain_types import EmployeeLevel
from workforce.schemas.envelope import ResponseMessage
from workforce.services.rule_engine import RuleEngine

router = APIRouter(prefix="/api/v1/salaries", tags=["salaries"])


@router.get("", response_model=ResponseMessage[float])
async def salaries(
    level: EmployeeLevel | None = Query(None),
    engine: RuleEngine = Depends(get_rule_engine),
):
    return ResponseMessage(body=unwrap(await engine.salaries(level), "salaries"))


@router.get("/total", response_model=ResponseMessage[float])
async def summarize_salaries(engine: RuleEngine = Depends(get_rule_engine)):
    return ResponseMessage(
        body=unwrap(await engine.summarize_salaries(), "summarize_salaries"),
    )
