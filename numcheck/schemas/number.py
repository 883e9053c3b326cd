"""Number Schemas: response body for the number check endpoint."""

from pydantic import BaseModel

from numcheck.core.domain_types import CheckOutcome


class NumberCheckResponse(BaseModel):
    """Successful check. Failures use the NumCheckError envelope instead."""
    record_id: int
    valid: bool = True
    outcome: CheckOutcome = CheckOutcome.VALID
