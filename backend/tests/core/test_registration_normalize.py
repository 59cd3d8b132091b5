"""Registration Normalize: backend rows mapped into RegistrationRecord.

Tests:
    - Status fallback order and blank handling
    - Identifier and class fallbacks (student_code, class_code)
    - camelCase keys accepted alongside snake_case
    - Missing keys never raise
"""

from defense_desk.core.domain_types import ReportStatus
from defense_desk.core.registration_normalize import (
    normalize_registration, normalize_registrations,
)
from defense_desk.core.registration_stats import aggregate


def test_maps_stored_procedure_row():
    record = normalize_registration({
        "id": 12, "session_id": 3, "student_code": "SV012",
        "student_name": " Tran Minh ", "class_code": "CNTT1",
        "report_status": "reporting", "report_status_note": "on time",
        "supervisor_name": "Dr. Le", "project_title": "Chatbot",
        "internship_company_name": "FPT", "major_name": "Software Engineering",
    })
    assert record.id == "12"
    assert record.session_id == "3"
    assert record.student_id == "SV012"
    assert record.student_name == "Tran Minh"
    assert record.class_name == "CNTT1"
    assert record.report_status == "reporting"
    assert record.report_status_note == "on time"
    assert record.supervisor_name == "Dr. Le"
    assert record.project_title == "Chatbot"
    assert record.internship_company_name == "FPT"
    assert record.major_name == "Software Engineering"


def test_report_status_preferred_over_legacy_fields():
    record = normalize_registration({
        "id": 1, "report_status": "withdrawn",
        "graduation_status": "reporting", "internship_status": "exempted",
    })
    assert record.report_status == "withdrawn"


def test_graduation_status_used_when_report_status_missing():
    record = normalize_registration({
        "id": 1, "report_status": None,
        "graduation_status": "exempted", "internship_status": "reporting",
    })
    assert record.report_status == "exempted"


def test_internship_status_used_last():
    record = normalize_registration({"id": 1, "internship_status": "reporting"})
    assert record.report_status == "reporting"


def test_blank_status_becomes_none():
    record = normalize_registration({"id": 1, "report_status": "  "})
    assert record.report_status is None
    assert record.status is None


def test_student_code_preferred_over_numeric_student_id():
    assert normalize_registration(
        {"id": 1, "student_code": "SV9", "student_id": 9},
    ).student_id == "SV9"
    assert normalize_registration({"id": 1, "student_id": 9}).student_id == "9"


def test_class_code_preferred_over_class_name():
    assert normalize_registration(
        {"id": 1, "class_code": "C1", "class_name": "Class One"},
    ).class_name == "C1"
    assert normalize_registration(
        {"id": 1, "class_name": "Class One"},
    ).class_name == "Class One"


def test_camel_case_keys_accepted():
    record = normalize_registration({
        "id": "r1", "sessionId": "s1", "studentName": "An",
        "className": "K1", "reportStatus": "reporting",
        "supervisorName": "Dr. X", "projectTitle": "P",
        "internship_companyName": "Viettel", "majorName": "IS",
    })
    assert record.session_id == "s1"
    assert record.student_name == "An"
    assert record.class_name == "K1"
    assert record.report_status == "reporting"
    assert record.supervisor_name == "Dr. X"
    assert record.project_title == "P"
    assert record.internship_company_name == "Viettel"
    assert record.major_name == "IS"


def test_empty_row_yields_empty_record():
    record = normalize_registration({})
    assert record.id == ""
    assert record.student_id == ""
    assert record.student_name == ""
    assert record.class_name == ""
    assert record.report_status is None
    assert record.supervisor_name is None
    assert record.project_title is None
    assert record.internship_company_name is None


def test_blank_optional_strings_become_none():
    record = normalize_registration(
        {"id": 1, "supervisor_name": "", "project_title": "   "},
    )
    assert record.supervisor_name is None
    assert record.project_title is None


def test_unknown_status_preserved_verbatim():
    record = normalize_registration({"id": 1, "report_status": "graduated"})
    assert record.report_status == "graduated"
    assert record.status is None


def test_track_views_mirror_unified_status():
    record = normalize_registration({"id": 1, "report_status": "withdrawn"})
    assert record.status is ReportStatus.WITHDRAWN
    assert record.graduation_status is ReportStatus.WITHDRAWN
    assert record.internship_status is ReportStatus.WITHDRAWN


def test_normalize_registrations_preserves_order():
    records = normalize_registrations([{"id": 3}, {"id": 1}, {"id": 2}])
    assert [r.id for r in records] == ["3", "1", "2"]


def test_titles_and_supervisors_differing_only_in_whitespace_are_merged():
    records = normalize_registrations([
        {"id": 1, "supervisor_name": "Dr. Le ", "project_title": "Portal "},
        {"id": 2, "supervisor_name": "Dr. Le", "project_title": "Portal"},
    ])
    stats = aggregate(records)
    assert stats.project_count == 1
    assert stats.supervisor_count == 1
    assert stats.supervisor_details[0].student_count == 2
    assert stats.supervisor_details[0].project_count == 1


def test_inner_whitespace_and_case_still_distinguish_titles():
    records = normalize_registrations([
        {"id": 1, "project_title": "Library  Portal"},
        {"id": 2, "project_title": "Library Portal"},
        {"id": 3, "project_title": "library portal"},
    ])
    assert aggregate(records).project_count == 3
