"""Database Layer — declarative base shared by all ORM models.

Invariants:
    - Engine and session lifecycle live in infrastructure/database.py
"""
