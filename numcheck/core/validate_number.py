"""Number Validation: the threshold rule and outcome classification.

Invariants:
    - check_result raises ResultTooHighError iff value > MAX_VALID_RESULT
    - Boundary: 10 passes, 11 fails
    - classify_outcome never raises; every exception maps to an outcome

Design Decisions:
    - Raise instead of returning an error value: callers use try/except like
      every other Python API
    - Unknown exceptions classify as LOOKUP_FAILED: anything not raised by the
      rule itself came from the store
"""

from numcheck.core.domain_types import CheckOutcome, MAX_VALID_RESULT
from numcheck.core.errors import ErrorContext, ResultTooHighError


def check_result(value: int, record_id: int | None = None) -> None:
    """Raise ResultTooHighError when value exceeds MAX_VALID_RESULT."""
    if value > MAX_VALID_RESULT:
        raise ResultTooHighError(
            value, MAX_VALID_RESULT, ErrorContext(record_id=record_id),
        )


def classify_outcome(error: BaseException | None) -> CheckOutcome:
    """Map the error (or None) returned from a check to a CheckOutcome."""
    if error is None:
        return CheckOutcome.VALID
    if isinstance(error, ResultTooHighError):
        return CheckOutcome.TOO_HIGH
    return CheckOutcome.LOOKUP_FAILED
