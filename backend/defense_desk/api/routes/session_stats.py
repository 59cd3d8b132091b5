"""Session Stats Routes: statistics and list queries over a session's registrations.

Invariants:
    - Registrations arrive in the request body; nothing is fetched or stored
    - Rows normalized by core before any computation
    - page_size above settings.max_page_size is rejected with QueryValidationError

Design Decisions:
    - POST over GET: registration lists are too large for a query string
"""

import logging

from fastapi import APIRouter

from defense_desk.config import get_settings
from defense_desk.core.errors import ErrorContext, QueryValidationError
from defense_desk.core.registration_normalize import normalize_registrations
from defense_desk.core.registration_query import query_registrations
from defense_desk.core.registration_stats import aggregate
from defense_desk.schemas.registration import (
    RegistrationPageResponse, RegistrationQuery,
)
from defense_desk.schemas.session import SessionStatsRequest, SessionStatsResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/sessions", tags=["sessions"])


@router.post("/stats", response_model=SessionStatsResponse)
async def session_stats(body: SessionStatsRequest):
    """Aggregate counts and breakdowns for one session's registrations."""
    records = normalize_registrations(body.registrations)
    stats = aggregate(records)
    logger.info(
        "Computed session stats",
        extra={
            "session_id": body.session_id,
            "registration_count": stats.student_count,
        },
    )
    return SessionStatsResponse.from_stats(stats)


@router.post("/registrations/query", response_model=RegistrationPageResponse)
async def query_session_registrations(body: RegistrationQuery):
    """Search, filter, sort and paginate a session's registrations."""
    settings = get_settings()
    page_size = body.page_size or settings.default_page_size
    if page_size > settings.max_page_size:
        raise QueryValidationError(
            f"page_size must be <= {settings.max_page_size}, got {page_size}",
            field="page_size",
            context=ErrorContext(debug_info={"page_size": page_size}),
        )
    page = query_registrations(
        normalize_registrations(body.registrations),
        search=body.search,
        status=body.status,
        sort_by=body.sort_by,
        descending=body.descending,
        page=body.page,
        page_size=page_size,
    )
    logger.debug(
        f"Registration query matched {page.total} row(s)",
        extra={"registration_count": len(body.registrations)},
    )
    return RegistrationPageResponse.from_page(page)
