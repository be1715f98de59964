"""Core Layer — pure business rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: RuleEngine (services/)
      reads through the Roster, asks core/ for a verdict, then writes
"""
