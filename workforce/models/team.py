"""Team ORM — persists teams keyed by their unique name.

Invariants:
    - name is the primary key (unique team names enforced by the database as well)
    - members derived from employees.team_name, never stored on the team row

Design Decisions:
    - Natural key over surrogate id: the name is the team's identity and is immutable
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from workforce.db.base import Base


class TeamModel(Base):
    """Team row."""
    __tablename__ = "teams"

    name: Mapped[str] = mapped_column(String(100), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
