"""Defense Schedule Route: expected defense date for a session start date.

Invariants:
    - The caller always supplies start_date; the service never assumes "today"
"""

import logging

from fastapi import APIRouter

from defense_desk.core.defense_schedule import compute_expected_date
from defense_desk.schemas.session import ExpectedDateRequest, ExpectedDateResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/sessions", tags=["sessions"])


@router.post("/expected-date", response_model=ExpectedDateResponse)
async def expected_date(body: ExpectedDateRequest):
    """Second Saturday of the month three months after start_date."""
    result = compute_expected_date(body.start_date)
    logger.info(
        f"Expected defense date {result.isoformat()}",
        extra={"start_date": body.start_date.isoformat()},
    )
    return ExpectedDateResponse(start_date=body.start_date, expected_date=result)
