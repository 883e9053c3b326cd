"""Root conftest: shared test configuration."""

import os

# Keep tests off any real database configured in the environment
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///numcheck-test.db",
)
os.environ.setdefault("LOG_LEVEL", "DEBUG")
