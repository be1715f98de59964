"""ORM Models — SQLAlchemy declarative models for employees and teams.

Invariants:
    - All models inherit from Base (db/base.py)
    - Team membership is stored on the employee row (employees.team_name)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from workforce.models.employee import EmployeeModel  # noqa: F401
from workforce.models.team import TeamModel  # noqa: F401
