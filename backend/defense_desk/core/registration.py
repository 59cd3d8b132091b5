"""Registration Record: one student's enrollment within a defense session.

Invariants:
    - report_status is the only stored status field
    - graduation_status and internship_status are read-only views of it and always equal
    - Unknown status strings are kept verbatim but map to status=None

Design Decisions:
    - Frozen dataclass: records are values, shared freely between stats and query helpers
    - Two legacy track views derived, never stored (ADR: one status column replaced two)
"""

from dataclasses import dataclass

from defense_desk.core.domain_types import RegistrationId, ReportStatus, SessionId


@dataclass(frozen=True)
class RegistrationRecord:
    """Immutable registration row as consumed by the stats and query helpers."""

    id: RegistrationId
    student_id: str = ""
    student_name: str = ""
    class_name: str = ""
    report_status: str | None = None
    supervisor_name: str | None = None
    project_title: str | None = None
    internship_company_name: str | None = None
    session_id: SessionId = SessionId("")
    major_name: str | None = None
    report_status_note: str | None = None

    @property
    def status(self) -> ReportStatus | None:
        """Parsed status, None when absent or outside the known taxonomy."""
        if self.report_status is None:
            return None
        try:
            return ReportStatus(self.report_status)
        except ValueError:
            return None

    @property
    def graduation_status(self) -> ReportStatus | None:
        return self.status

    @property
    def internship_status(self) -> ReportStatus | None:
        return self.status
