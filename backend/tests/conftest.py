"""Root conftest — shared test configuration."""

import os

# Never touch the developer's data.db from tests
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("DATABASE_AUTO_CREATE", "false")
