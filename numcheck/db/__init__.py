"""Database Infrastructure: SQLAlchemy declarative base for the ORM models.

Invariants:
    - All sessions are async (AsyncSession), created by DatabaseSessionManager
"""
