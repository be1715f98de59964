"""Employee Routes — hiring, firing, listings, raises and promotions.

Invariants:
    - Every rule failure surfaces as 400 INVALID_OPERATION via unwrap()
    - DELETE /{id} and DELETE /{id}/team are idempotent no-ops on absent references
    - /salary is declared before /{employee_id} so the literal path wins
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from workforce.api.dependencies import get_rule_engine, unwrap
from workforce.core.domain_types import EmployeeId, EmployeeLevel
from workforce.infrastructure.database import get_db
from workforce.schemas.employee import EmployeeHire, EmployeeResponse, RaiseRequest
from workforce.schemas.envelope import ResponseMessage
from workforce.services.rule_engine import RuleEngine

router = APIRouter(prefix="/api/v1/employees", tags=["employees"])


@router.post(
    "", response_model=ResponseMessage[EmployeeResponse],
    status_code=status.HTTP_201_CREATED,
)
async def hire_employee(
    body: EmployeeHire,
    db: AsyncSession = Depends(get_db),
    engine: RuleEngine = Depends(get_rule_engine),
):
    """Hire a new employee at level WORKER."""
    employee = unwrap(
        await engine.hire(body.name, body.surname, body.salary), "hire",
    )
    await db.commit()
    return ResponseMessage(body=EmployeeResponse.from_domain(employee))


@router.get("", response_model=ResponseMessage[list[EmployeeResponse]])
async def list_employees(
    level: EmployeeLevel | None = Query(None),
    engine: RuleEngine = Depends(get_rule_engine),
):
    """List all employees, optionally only those at one level."""
    employees = unwrap(await engine.list_employees(level), "list_employees")
    return ResponseMessage(
        body=[EmployeeResponse.from_domain(e) for e in employees],
    )


@router.get("/salary", response_model=ResponseMessage[list[EmployeeResponse]])
async def list_employees_by_salary(
    salary_from: float | None = Query(None),
    salary_to: float | None = Query(None),
    engine: RuleEngine = Depends(get_rule_engine),
):
    """Employees with salary_from < salary < salary_to (open bounds when omitted)."""
    employees = unwrap(
        await engine.list_employees_by_salary(salary_from, salary_to),
        "list_employees_by_salary",
    )
    return ResponseMessage(
        body=[EmployeeResponse.from_domain(e) for e in employees],
    )


@router.get("/{employee_id}", response_model=ResponseMessage[EmployeeResponse])
async def get_employee(
    employee_id: int, engine: RuleEngine = Depends(get_rule_engine),
):
    employee = unwrap(
        await engine.find_employee(EmployeeId(employee_id)),
        "find_employee", employee_id=employee_id,
    )
    return ResponseMessage(body=EmployeeResponse.from_domain(employee))


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def fire_employee(
    employee_id: int,
    db: AsyncSession = Depends(get_db),
    engine: RuleEngine = Depends(get_rule_engine),
):
    """Fire an employee. Unknown ids succeed silently."""
    unwrap(await engine.fire(EmployeeId(employee_id)), "fire", employee_id=employee_id)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{employee_id}/raise", response_model=ResponseMessage[EmployeeResponse],
)
async def give_raise(
    employee_id: int,
    body: RaiseRequest,
    db: AsyncSession = Depends(get_db),
    engine: RuleEngine = Depends(get_rule_engine),
):
    employee = unwrap(
        await engine.give_raise(EmployeeId(employee_id), body.percent),
        "give_raise", employee_id=employee_id,
    )
    await db.commit()
    return ResponseMessage(body=EmployeeResponse.from_domain(employee))


@router.post(
    "/{employee_id}/promotion", response_model=ResponseMessage[EmployeeResponse],
)
async def give_promotion(
    employee_id: int,
    db: AsyncSession = Depends(get_db),
    engine: RuleEngine = Depends(get_rule_engine),
):
    """Promote one step along the promotion table, applying its raise."""
    employee = unwrap(
        await engine.give_promotion(EmployeeId(employee_id)),
        "give_promotion", employee_id=employee_id,
    )
    await db.commit()
    return ResponseMessage(body=EmployeeResponse.from_domain(employee))


@router.delete("/{employee_id}/team", status_code=status.HTTP_204_NO_CONTENT)
async def remove_employee_from_team(
    employee_id: int,
    db: AsyncSession = Depends(get_db),
    engine: RuleEngine = Depends(get_rule_engine),
):
    unwrap(
        await engine.remove_employee_from_team(EmployeeId(employee_id)),
        "remove_employee_from_team", employee_id=employee_id,
    )
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
