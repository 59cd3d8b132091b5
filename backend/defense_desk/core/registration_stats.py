"""Registration Stats: pure computation of session statistics from registrations.

Invariants:
    - No IO, no DB: input is an iterable of RegistrationRecord, output a SessionStats value
    - Never raises: empty input yields all-zero counts and empty tuples
    - Graduation and internship counters read the same status, so they always mirror
    - Detail tuples keep first-seen order of names; student tuples keep input order

Design Decisions:
    - Pure function, not a method on RegistrationRecord (ADR: records are data, stats are presentation)
    - Single pass over the input; distinct counts via sets, per-name buckets via insertion-ordered dict
    - exempted has no internship counter: internships cannot be exempted
"""

from dataclasses import dataclass, field
from typing import Iterable

from defense_desk.core.domain_types import ReportStatus
from defense_desk.core.registration import RegistrationRecord


@dataclass(frozen=True)
class SupervisorSummary:
    name: str
    project_count: int
    student_count: int


@dataclass(frozen=True)
class MajorSummary:
    name: str
    student_count: int


@dataclass(frozen=True)
class SessionStats:
    """Derived statistics for one session. Recomputed on every input change."""

    student_count: int = 0
    supervisor_count: int = 0
    project_count: int = 0
    reporting_graduation_count: int = 0
    reporting_internship_count: int = 0
    exempted_graduation_count: int = 0
    withdrawn_graduation_count: int = 0
    withdrawn_internship_count: int = 0
    internship_company_count: int = 0
    supervisor_details: tuple[SupervisorSummary, ...] = ()
    major_details: tuple[MajorSummary, ...] = ()
    withdrawn_students: tuple[RegistrationRecord, ...] = ()
    exempted_students: tuple[RegistrationRecord, ...] = ()


@dataclass
class _SupervisorBucket:
    projects: set[str] = field(default_factory=set)
    student_count: int = 0


def aggregate(records: Iterable[RegistrationRecord]) -> SessionStats:
    """Compute SessionStats from a session's registrations. Pure, no IO."""
    records = list(records)

    reporting = exempted = withdrawn = 0
    withdrawn_students: list[RegistrationRecord] = []
    exempted_students: list[RegistrationRecord] = []
    supervisors: dict[str, _SupervisorBucket] = {}
    majors: dict[str, int] = {}
    projects: set[str] = set()
    companies: set[str] = set()

    for reg in records:
        status = reg.status
        if status is ReportStatus.REPORTING:
            reporting += 1
        elif status is ReportStatus.EXEMPTED:
            exempted += 1
            exempted_students.append(reg)
        elif status is ReportStatus.WITHDRAWN:
            withdrawn += 1
            withdrawn_students.append(reg)

        if reg.supervisor_name:
            bucket = supervisors.setdefault(reg.supervisor_name, _SupervisorBucket())
            bucket.student_count += 1
            if reg.project_title:
                bucket.projects.add(reg.project_title)

        if reg.major_name:
            majors[reg.major_name] = majors.get(reg.major_name, 0) + 1
        if reg.project_title:
            projects.add(reg.project_title)
        if reg.internship_company_name:
            companies.add(reg.internship_company_name)

    return SessionStats(
        student_count=len(records),
        supervisor_count=len(supervisors),
        project_count=len(projects),
        reporting_graduation_count=reporting,
        reporting_internship_count=reporting,
        exempted_graduation_count=exempted,
        withdrawn_graduation_count=withdrawn,
        withdrawn_internship_count=withdrawn,
        internship_company_count=len(companies),
        supervisor_details=tuple(
            SupervisorSummary(
                name=name,
                project_count=len(bucket.projects),
                student_count=bucket.student_count,
            )
            for name, bucket in supervisors.items()
        ),
        major_details=tuple(
            MajorSummary(name=name, student_count=count)
            for name, count in majors.items()
        ),
        withdrawn_students=tuple(withdrawn_students),
        exempted_students=tuple(exempted_students),
    )
