"""Registration Schemas: raw rows in, normalized records and pages out.

Invariants:
    - Raw rows are free-form JSON objects; normalization happens in core, not here
    - RegistrationOut exposes the stored status plus both derived track views
    - RegistrationQuery.page and page_size are >= 1 (upper bound checked against settings in the route)

Design Decisions:
    - from_record() builders keep dataclass -> schema mapping in one place
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from defense_desk.core.domain_types import ReportStatus, SortField
from defense_desk.core.registration import RegistrationRecord
from defense_desk.core.registration_query import RegistrationPage


class RegistrationOut(BaseModel):
    """Normalized registration as returned by the API."""
    id: str
    session_id: str
    student_id: str
    student_name: str
    class_name: str
    report_status: str | None
    report_status_note: str | None
    graduation_status: ReportStatus | None
    internship_status: ReportStatus | None
    supervisor_name: str | None
    project_title: str | None
    internship_company_name: str | None
    major_name: str | None

    @classmethod
    def from_record(cls, record: RegistrationRecord) -> "RegistrationOut":
        return cls(
            id=record.id,
            session_id=record.session_id,
            student_id=record.student_id,
            student_name=record.student_name,
            class_name=record.class_name,
            report_status=record.report_status,
            report_status_note=record.report_status_note,
            graduation_status=record.graduation_status,
            internship_status=record.internship_status,
            supervisor_name=record.supervisor_name,
            project_title=record.project_title,
            internship_company_name=record.internship_company_name,
            major_name=record.major_name,
        )


class RegistrationQuery(BaseModel):
    """Search/filter/sort/page request over a session's registrations."""
    registrations: list[dict[str, Any]] = Field(default_factory=list)
    search: str | None = Field(None, max_length=200)
    status: ReportStatus | None = None
    sort_by: SortField | None = None
    descending: bool = False
    page: int = Field(1, ge=1)
    page_size: int | None = Field(None, ge=1)

    @field_validator("search")
    @classmethod
    def strip_search(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class RegistrationPageResponse(BaseModel):
    items: list[RegistrationOut]
    total: int
    page: int
    page_size: int
    total_pages: int

    @classmethod
    def from_page(cls, page: RegistrationPage) -> "RegistrationPageResponse":
        return cls(
            items=[RegistrationOut.from_record(r) for r in page.items],
            total=page.total,
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
        )
