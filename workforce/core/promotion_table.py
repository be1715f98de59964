"""Promotion Table — explicit level transitions with their accompanying raise.

Invariants:
    - PROMOTION_TABLE and TERMINAL_LEVELS partition EmployeeLevel (total, disjoint)
    - Every raise in the table passes validate_raise_percent
    - plan_promotion is PURE: returns the promoted record, does NOT persist it

Design Decisions:
    - Table over branching: "no transition defined" is a first-class, testable case
    - Level and salary change computed together so the shell writes them in one save
"""

from dataclasses import dataclass, replace

from workforce.core.domain_types import Employee, EmployeeLevel
from workforce.core.enforce_salary import apply_raise, validate_raise_percent
from workforce.core.outcome import Ok, Result, ValidationError


@dataclass(frozen=True)
class PromotionStep:
    next_level: EmployeeLevel
    raise_percent: float


PROMOTION_TABLE: dict[EmployeeLevel, PromotionStep] = {
    EmployeeLevel.WORKER: PromotionStep(EmployeeLevel.LEAD, 5.0),
    EmployeeLevel.LEAD: PromotionStep(EmployeeLevel.MANAGER, 5.0),
    EmployeeLevel.SALES: PromotionStep(EmployeeLevel.MANAGER, 5.0),
    EmployeeLevel.ACCOUNTING: PromotionStep(EmployeeLevel.MANAGER, 5.0),
    EmployeeLevel.MANAGER: PromotionStep(EmployeeLevel.EXECUTIVE, 3.0),
}

TERMINAL_LEVELS: frozenset[EmployeeLevel] = frozenset({
    EmployeeLevel.EXECUTIVE,
    EmployeeLevel.INDEPENDENT,
})


def next_promotion(level: EmployeeLevel) -> PromotionStep | None:
    return PROMOTION_TABLE.get(level)


def plan_promotion(employee: Employee) -> Result[Employee]:
    """Compute the promoted employee record, or why promotion is impossible."""
    step = next_promotion(employee.level)
    if step is None:
        return ValidationError(
            "TERMINAL_LEVEL",
            f"Employee at level '{employee.level.value}' cannot be promoted.",
        )
    if error := validate_raise_percent(step.raise_percent):
        return error
    return Ok(replace(
        employee,
        level=step.next_level,
        salary=apply_raise(employee.salary, step.raise_percent),
    ))
