"""SQL Number Store: production NumberStore backed by the numbers table.

Invariants:
    - Satisfies core.repository_protocols.NumberStore structurally (no inheritance)
    - Missing rows raise RecordNotFoundError; driver failures raise DatabaseError
    - Holds only the session manager; connection state lives in the engine

Design Decisions:
    - One short-lived session per lookup: reads only, nothing to commit
"""

import logging

from sqlalchemy import select

from numcheck.core.domain_types import RecordId, NumberValue
from numcheck.core.errors import RecordNotFoundError
from numcheck.infrastructure.database import DatabaseSessionManager
from numcheck.models.number_record import NumberRecord

logger = logging.getLogger(__name__)


class SqlNumberStore:
    """Looks numbers up by id through a DatabaseSessionManager."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db_manager = db_manager

    async def get(self, record_id: RecordId) -> NumberValue:
        async with self._db_manager.session() as db:
            result = await db.execute(
                select(NumberRecord.value).where(NumberRecord.id == record_id),
            )
            value = result.scalar_one_or_none()
        if value is None:
            logger.info(
                "Number %s not found", record_id,
                extra={"record_id": record_id, "error_code": "RECORD_NOT_FOUND"},
            )
            raise RecordNotFoundError(record_id)
        return NumberValue(value)

    async def put(self, record_id: RecordId, value: int) -> None:
        """Insert or overwrite the value stored under record_id."""
        async with self._db_manager.session() as db:
            record = await db.get(NumberRecord, record_id)
            if record is None:
                db.add(NumberRecord(id=record_id, value=value))
            else:
                record.value = value
            await db.commit()
