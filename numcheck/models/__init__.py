"""ORM Models: SQLAlchemy declarative models read by the SQL store.

Design Decisions:
    - Imported here so Base.metadata is populated before create_all runs
"""

from numcheck.models.number_record import NumberRecord  # noqa: F401
