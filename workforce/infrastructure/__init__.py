"""Infrastructure Layer — database sessions, Roster implementation, logging.

Invariants:
    - Only this layer (and api/) touches SQLAlchemy sessions
"""
