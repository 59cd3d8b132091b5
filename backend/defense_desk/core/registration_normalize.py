"""Registration Normalize: map raw backend registration rows to RegistrationRecord.

Invariants:
    - Never raises for a Mapping input: missing keys fall back to empty/absent
    - Status precedence: report_status > graduation_status > internship_status > reportStatus
    - student_code preferred over student_id; class_code over class_name
    - Strings stripped; empty optional strings become None

Design Decisions:
    - Accept both snake_case (stored procedure output) and camelCase (legacy UI payloads)
    - Unknown status strings are preserved verbatim so the stats layer can ignore them
"""

from typing import Any, Iterable, Mapping

from defense_desk.core.domain_types import RegistrationId, SessionId
from defense_desk.core.registration import RegistrationRecord


def _first(row: Mapping[str, Any], *keys: str) -> Any:
    """First value under keys that is neither None nor a blank string."""
    for key in keys:
        value = row.get(key)
        if value is None:
            continue
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        return value
    return None


def _text(row: Mapping[str, Any], *keys: str) -> str:
    value = _first(row, *keys)
    return "" if value is None else str(value)


def _optional_text(row: Mapping[str, Any], *keys: str) -> str | None:
    value = _first(row, *keys)
    return None if value is None else str(value)


def normalize_registration(row: Mapping[str, Any]) -> RegistrationRecord:
    """Build a RegistrationRecord from one backend row."""
    return RegistrationRecord(
        id=RegistrationId(_text(row, "id")),
        session_id=SessionId(_text(row, "session_id", "sessionId")),
        student_id=_text(row, "student_code", "student_id", "studentId"),
        student_name=_text(row, "student_name", "studentName"),
        class_name=_text(row, "class_code", "class_name", "className"),
        report_status=_optional_text(
            row, "report_status", "graduation_status",
            "internship_status", "reportStatus",
        ),
        report_status_note=_optional_text(
            row, "report_status_note", "graduation_status_note",
            "internship_status_note", "reportStatusNote",
        ),
        supervisor_name=_optional_text(row, "supervisor_name", "supervisorName"),
        project_title=_optional_text(row, "project_title", "projectTitle"),
        internship_company_name=_optional_text(
            row, "internship_company_name", "internship_companyName",
            "internshipCompanyName",
        ),
        major_name=_optional_text(row, "major_name", "majorName"),
    )


def normalize_registrations(
    rows: Iterable[Mapping[str, Any]],
) -> list[RegistrationRecord]:
    return [normalize_registration(row) for row in rows]
