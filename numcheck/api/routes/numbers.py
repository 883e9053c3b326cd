"""Number Check Route: HTTP entry point for NumberService.get_number.

Invariants:
    - 200 only when the stored value is valid
    - Lookup and validation failures propagate to the NumCheckError handler,
      which maps them to their http_status (404, 422, 502, 503)
"""

import logging

from fastapi import APIRouter, Depends

from numcheck.api.dependencies import get_number_service
from numcheck.core.domain_types import RecordId
from numcheck.schemas.number import NumberCheckResponse
from numcheck.services.number_service import NumberService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/numbers", tags=["numbers"])


@router.get("/{record_id}", response_model=NumberCheckResponse)
async def check_number(
    record_id: int,
    service: NumberService = Depends(get_number_service),
):
    """Validate the number stored under record_id."""
    await service.get_number(RecordId(record_id))
    return NumberCheckResponse(record_id=record_id)
