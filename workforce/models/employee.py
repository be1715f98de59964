"""Employee ORM — persists employee records and their team lookup key.

Invariants:
    - id is an autoincrement integer primary key (stable once assigned)
    - salary is non-negative (CHECK constraint)
    - level stores EmployeeLevel.value
    - team_name references teams.name; NULL means unassigned

Design Decisions:
    - Membership as a nullable FK on the employee row: one team per
      employee holds structurally at the storage level
    - ondelete SET NULL as a backstop; RuleEngine detaches members explicitly
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from workforce.db.base import Base


class EmployeeModel(Base):
    """Employee row."""
    __tablename__ = "employees"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_employees_salary_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    salary: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    level: Mapped[str] = mapped_column(
        String(20), nullable=False, default="worker", index=True,
    )
    team_name: Mapped[str | None] = mapped_column(
        String(100),
        ForeignKey("teams.name", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
