"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real store
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
