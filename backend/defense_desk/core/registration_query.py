"""Registration Query: search, filter, sort and paginate a session's registrations.

Invariants:
    - Input sequence is never mutated; output items keep input order unless sorted
    - Search is case-insensitive substring match; blank search matches everything
    - Sorting is stable; records with an empty sort key go last in both directions
    - page and page_size are 1-based and >= 1, otherwise QueryValidationError
    - page_size has no default here: callers pass the configured size
    - A page past the end returns no items but correct total/total_pages

Design Decisions:
    - Mirrors the registration table behavior of the admin UI so exports and API agree
    - Pagination math kept here, not in routes (routes stay thin)
"""

import math
from dataclasses import dataclass
from typing import Sequence

from defense_desk.core.domain_types import ReportStatus, SortField
from defense_desk.core.errors import QueryValidationError
from defense_desk.core.registration import RegistrationRecord

_SEARCH_FIELDS = (
    "student_id", "student_name", "class_name",
    "supervisor_name", "project_title",
)


@dataclass(frozen=True)
class RegistrationPage:
    items: tuple[RegistrationRecord, ...]
    total: int
    page: int
    page_size: int
    total_pages: int


def matches_search(record: RegistrationRecord, search: str | None) -> bool:
    """True if any searchable field contains search (case-insensitive)."""
    needle = (search or "").strip().casefold()
    if not needle:
        return True
    return any(
        needle in (getattr(record, name) or "").casefold()
        for name in _SEARCH_FIELDS
    )


def sort_registrations(
    records: Sequence[RegistrationRecord],
    sort_by: SortField,
    descending: bool = False,
) -> list[RegistrationRecord]:
    """Stable sort by one field; empty values always trail."""
    filled = [r for r in records if getattr(r, sort_by.value)]
    empty = [r for r in records if not getattr(r, sort_by.value)]
    filled.sort(
        key=lambda r: getattr(r, sort_by.value).casefold(),
        reverse=descending,
    )
    return filled + empty


def paginate(
    records: Sequence[RegistrationRecord], page: int, page_size: int,
) -> RegistrationPage:
    if page < 1:
        raise QueryValidationError(f"page must be >= 1, got {page}", field="page")
    if page_size < 1:
        raise QueryValidationError(
            f"page_size must be >= 1, got {page_size}", field="page_size",
        )
    total = len(records)
    start = (page - 1) * page_size
    return RegistrationPage(
        items=tuple(records[start:start + page_size]),
        total=total,
        page=page,
        page_size=page_size,
        total_pages=max(1, math.ceil(total / page_size)),
    )


def query_registrations(
    records: Sequence[RegistrationRecord],
    *,
    page_size: int,
    search: str | None = None,
    status: ReportStatus | None = None,
    sort_by: SortField | None = None,
    descending: bool = False,
    page: int = 1,
) -> RegistrationPage:
    """Filter by search text and status, sort, then slice one page."""
    selected = [
        r for r in records
        if matches_search(r, search) and (status is None or r.status is status)
    ]
    if sort_by is not None:
        selected = sort_registrations(selected, sort_by, descending)
    return paginate(selected, page, page_size)
