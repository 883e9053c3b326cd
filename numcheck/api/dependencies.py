"""API Dependencies: the FastAPI-side composition root.

Invariants:
    - The session manager comes from app.state, set by the lifespan
    - Every level is overridable via app.dependency_overrides (tests swap the store)

Design Decisions:
    - Store and service built per request: both are stateless wrappers, the
      engine underneath is shared
"""

from fastapi import Depends, Request

from numcheck.core.repository_protocols import NumberStore
from numcheck.infrastructure.database import DatabaseSessionManager
from numcheck.infrastructure.sql_number_store import SqlNumberStore
from numcheck.services.number_service import NumberService


def get_db_manager(request: Request) -> DatabaseSessionManager:
    db_manager = getattr(request.app.state, "db_manager", None)
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    return db_manager


def get_number_store(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> NumberStore:
    return SqlNumberStore(db_manager)


def get_number_service(
    store: NumberStore = Depends(get_number_store),
) -> NumberService:
    return NumberService(store)
