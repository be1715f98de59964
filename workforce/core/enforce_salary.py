"""Salary Enforcement — raise bounds, salary range filtering and payroll sums.

Invariants:
    - Raise percent must be a finite number within [MIN_RAISE_PERCENT, MAX_RAISE_PERCENT]
    - apply_raise never produces a negative salary from a non-negative one
    - Salary range filtering is strict on both bounds: lower < salary < upper
    - Absent lower bound means 0, absent upper bound means +infinity

Design Decisions:
    - Bounds as module constants: single source of truth shared with promotion_table
    - Validators return ValidationError | None; the shell decides what to do with it
"""

import math
from collections.abc import Iterable

from workforce.core.domain_types import Employee
from workforce.core.outcome import ValidationError


MIN_RAISE_PERCENT: float = -5.0
MAX_RAISE_PERCENT: float = 100.0

DEFAULT_SALARY_FLOOR: float = 0.0
DEFAULT_SALARY_CEILING: float = math.inf


def validate_raise_percent(percent: float | None) -> ValidationError | None:
    """Reject missing, non-finite or out-of-range raise percentages."""
    if percent is None or not math.isfinite(percent):
        return ValidationError(
            "INVALID_RAISE_PERCENT", "Raise percent must be a finite number.",
        )
    if percent < MIN_RAISE_PERCENT or percent > MAX_RAISE_PERCENT:
        return ValidationError(
            "RAISE_OUT_OF_RANGE",
            f"Raise percent {percent} is outside "
            f"[{MIN_RAISE_PERCENT}, {MAX_RAISE_PERCENT}].",
        )
    return None


def validate_salary(salary: float | None) -> ValidationError | None:
    """Salary must be present, finite and non-negative."""
    if salary is None or not math.isfinite(salary):
        return ValidationError("INVALID_SALARY", "Salary must be a finite number.")
    if salary < 0:
        return ValidationError("NEGATIVE_SALARY", f"Salary {salary} is negative.")
    return None


def apply_raise(salary: float, percent: float) -> float:
    return salary * (1 + (percent / 100))


def resolve_salary_bounds(
    lower: float | None, upper: float | None,
) -> tuple[float, float]:
    """Fill absent bounds: lower -> 0, upper -> +inf."""
    return (
        DEFAULT_SALARY_FLOOR if lower is None else lower,
        DEFAULT_SALARY_CEILING if upper is None else upper,
    )


def within_salary_range(salary: float, lower: float, upper: float) -> bool:
    return lower < salary < upper


def sum_salaries(employees: Iterable[Employee]) -> float:
    return math.fsum(e.salary for e in employees)
