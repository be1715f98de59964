"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or read a developer .env for these keys
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")
