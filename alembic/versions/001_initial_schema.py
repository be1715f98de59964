"""Initial schema — teams, employees.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "teams",
        sa.Column("name", sa.String(100), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "employees",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("salary", sa.Float, nullable=False, server_default="0"),
        sa.Column("level", sa.String(20), nullable=False, server_default="worker"),
        sa.Column(
            "team_name", sa.String(100),
            sa.ForeignKey("teams.name", ondelete="SET NULL"), nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("salary >= 0", name="ck_employees_salary_non_negative"),
    )
    op.create_index("ix_employees_level", "employees", ["level"])
    op.create_index("ix_employees_team_name", "employees", ["team_name"])


def downgrade() -> None:
    op.drop_index("ix_employees_team_name", table_name="employees")
    op.drop_index("ix_employees_level", table_name="employees")
    op.drop_table("employees")
    op.drop_table("teams")
