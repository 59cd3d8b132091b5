"""Session Schemas: statistics and defense-date contracts for a defense session.

Invariants:
    - SessionStatsResponse mirrors core SessionStats field for field
    - ExpectedDateRequest.start_date is a calendar date (ISO 8601, YYYY-MM-DD)

Design Decisions:
    - Graduation/internship counters exposed separately even though they mirror,
      so dashboards written against the two-track layout keep working
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from defense_desk.core.registration_stats import SessionStats
from defense_desk.schemas.registration import RegistrationOut


class SessionStatsRequest(BaseModel):
    """Registrations of one session, as rows from the registrations endpoint."""
    session_id: str | None = Field(None, max_length=64)
    registrations: list[dict[str, Any]] = Field(default_factory=list)


class SupervisorSummaryOut(BaseModel):
    name: str
    project_count: int
    student_count: int


class MajorSummaryOut(BaseModel):
    name: str
    student_count: int


class SessionStatsResponse(BaseModel):
    """Session statistics: counts, per-supervisor and per-major breakdowns."""
    student_count: int
    supervisor_count: int
    project_count: int
    reporting_graduation_count: int
    reporting_internship_count: int
    exempted_graduation_count: int
    withdrawn_graduation_count: int
    withdrawn_internship_count: int
    internship_company_count: int
    supervisor_details: list[SupervisorSummaryOut]
    major_details: list[MajorSummaryOut]
    withdrawn_students: list[RegistrationOut]
    exempted_students: list[RegistrationOut]

    @classmethod
    def from_stats(cls, stats: SessionStats) -> "SessionStatsResponse":
        return cls(
            student_count=stats.student_count,
            supervisor_count=stats.supervisor_count,
            project_count=stats.project_count,
            reporting_graduation_count=stats.reporting_graduation_count,
            reporting_internship_count=stats.reporting_internship_count,
            exempted_graduation_count=stats.exempted_graduation_count,
            withdrawn_graduation_count=stats.withdrawn_graduation_count,
            withdrawn_internship_count=stats.withdrawn_internship_count,
            internship_company_count=stats.internship_company_count,
            supervisor_details=[
                SupervisorSummaryOut(
                    name=s.name,
                    project_count=s.project_count,
                    student_count=s.student_count,
                )
                for s in stats.supervisor_details
            ],
            major_details=[
                MajorSummaryOut(name=m.name, student_count=m.student_count)
                for m in stats.major_details
            ],
            withdrawn_students=[
                RegistrationOut.from_record(r) for r in stats.withdrawn_students
            ],
            exempted_students=[
                RegistrationOut.from_record(r) for r in stats.exempted_students
            ],
        )


class ExpectedDateRequest(BaseModel):
    start_date: date


class ExpectedDateResponse(BaseModel):
    start_date: date
    expected_date: date
