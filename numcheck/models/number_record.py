"""NumberRecord ORM: one stored integer per id.

Invariants:
    - id is the lookup key (plain integer, caller-assigned, not auto-increment)
    - value is non-nullable

Design Decisions:
    - Single table, no relationships: the store is a lookup-by-id capability and
      nothing else
"""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from numcheck.db.base import Base


class NumberRecord(Base):
    """A stored number, read by SqlNumberStore.get()."""
    __tablename__ = "numbers"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
    value: Mapped[int] = mapped_column(Integer, nullable=False)
