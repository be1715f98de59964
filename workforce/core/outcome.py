"""Operation Outcomes — Result union returned by every RuleEngine operation.

Invariants:
    - Business-rule failures are values (ValidationError), never raised in the rule layer
    - ValidationError never wraps an IO fault — it only describes a rule violation
    - error_code is stable and machine-readable; message is for humans

Design Decisions:
    - Ok/ValidationError union over exceptions: every operation states its failure
      path in its return type, callers branch with isinstance
    - to_exception() bridges into the WorkforceError hierarchy at the HTTP boundary only
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from workforce.core.errors import ErrorContext, InvalidOperationError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the operation's value."""
    value: T


@dataclass(frozen=True)
class ValidationError:
    """Rejected outcome — the single failure kind of the rule layer."""
    error_code: str
    message: str

    def to_exception(
        self, context: ErrorContext | None = None,
    ) -> InvalidOperationError:
        return InvalidOperationError(self.message, self.error_code, context)


Result = Ok[T] | ValidationError


def is_ok(result: "Result") -> bool:
    return isinstance(result, Ok)
