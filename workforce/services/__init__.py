"""Services Layer — RuleEngine and its handler groups.

Invariants:
    - Handlers split by concern (staffing, teams, compensation)
    - RuleEngine delegates explicitly (no auto-discovery)

Design Decisions:
    - One handler file per concern for locality (no god objects)
"""
