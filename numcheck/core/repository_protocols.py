"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by the caller via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, SqlNumberStore and test doubles
      never inherit from NumberStore
    - Async in Protocol: implementations do IO, but the validation rule that
      consumes the value stays sync and pure
"""

from typing import Protocol

from numcheck.core.domain_types import RecordId, NumberValue


class NumberStore(Protocol):
    """Contract for number lookup: implemented by shell.

    get() returns the value stored under record_id or raises
    StoreLookupError (or a subclass) when the value cannot be retrieved.
    """
    async def get(self, record_id: RecordId) -> NumberValue: ...
