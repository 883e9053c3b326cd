"""Number Service: fetches a value through an injected store and validates it.

Invariants:
    - The store is supplied by the caller; nothing here constructs or looks one up
    - Store failures propagate as the same exception instance (no wrapping, no retry)
    - NumberService and new_get_number behave identically for every input
    - No mutable state: concurrent calls never interact

Design Decisions:
    - Two injection styles: a frozen dataclass holding the store, and a closure
      capturing it. Both delegate to check_result so the rule exists once
    - No None check on store: a missing store fails loudly with AttributeError
      on first use
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from numcheck.core.domain_types import RecordId
from numcheck.core.errors import ResultTooHighError
from numcheck.core.repository_protocols import NumberStore
from numcheck.core.validate_number import check_result

logger = logging.getLogger(__name__)

GetNumber = Callable[[RecordId], Awaitable[None]]


@dataclass(frozen=True)
class NumberService:
    """Validates stored numbers. Holds exactly one dependency: the store."""

    store: NumberStore

    async def get_number(self, record_id: RecordId) -> None:
        """Fetch record_id from the store and raise if the value is invalid."""
        result = await self.store.get(record_id)
        _validate(record_id, result)


def new_get_number(store: NumberStore) -> GetNumber:
    """Build a get_number function bound to store via closure."""

    async def get_number(record_id: RecordId) -> None:
        result = await store.get(record_id)
        _validate(record_id, result)

    return get_number


def _validate(record_id: RecordId, result: int) -> None:
    logger.debug(
        "Checking number %s", record_id,
        extra={"record_id": record_id, "value": result},
    )
    try:
        check_result(result, record_id)
    except ResultTooHighError as e:
        logger.warning(
            "Rejected number %s: %s", record_id, e.message,
            extra={"record_id": record_id, "error_code": e.code},
        )
        raise
