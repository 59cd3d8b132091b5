"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ReportStatus has exactly four members, values match the backend enum column
    - All valid states encoded as Enums, no raw string matching outside core/registration.py

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RegistrationId = NewType("RegistrationId", str)
SessionId = NewType("SessionId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ReportStatus(str, Enum):
    """Lifecycle of a student's submission within a session."""
    NOT_YET_REPORTING = "not_yet_reporting"
    REPORTING = "reporting"
    EXEMPTED = "exempted"
    WITHDRAWN = "withdrawn"


class SortField(str, Enum):
    """Registration attributes the list view can be sorted by."""
    STUDENT_ID = "student_id"
    STUDENT_NAME = "student_name"
    CLASS_NAME = "class_name"
    REPORT_STATUS = "report_status"
    SUPERVISOR_NAME = "supervisor_name"
