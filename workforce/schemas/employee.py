"""Employee Schemas — hire, raise, and employee response models.

Invariants:
    - EmployeeHire.name/surname may be missing here: the rule layer rejects them,
      so both paths produce the same INVALID_OPERATION response
    - RaiseRequest.percent is a plain float; range checks live in core/enforce_salary

Design Decisions:
    - from_domain() classmethods keep the core → API mapping in one place
"""

from pydantic import BaseModel, Field

from workforce.core.domain_types import Employee, EmployeeLevel


class EmployeeHire(BaseModel):
    """Hire request."""
    name: str | None = Field(None, max_length=100)
    surname: str | None = Field(None, max_length=100)
    salary: float | None = None


class RaiseRequest(BaseModel):
    """Salary raise request — percent in [-5, 100] is enforced by the rule layer."""
    percent: float


class EmployeeResponse(BaseModel):
    """Employee response — public-facing employee data."""
    id: int
    first_name: str
    last_name: str
    salary: float
    level: EmployeeLevel
    team_name: str | None = None

    @classmethod
    def from_domain(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            salary=employee.salary,
            level=employee.level,
            team_name=employee.team_name,
        )
