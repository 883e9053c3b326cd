"""Infrastructure fixtures: a fresh SQLite database per test.

Design Decisions:
    - Temp-file SQLite over :memory:: every session opens its own connection,
      and a file keeps the table visible across them
"""

import pytest

from numcheck.infrastructure.database import DatabaseSessionManager
from numcheck.infrastructure.sql_number_store import SqlNumberStore


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'numbers.db'}",
    )
    await manager.create_tables()
    yield manager
    await manager.dispose()


@pytest.fixture
def sql_store(db_manager):
    return SqlNumberStore(db_manager)
