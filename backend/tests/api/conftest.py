"""API test fixtures: FastAPI app behind an in-process httpx client.

Invariants:
    - No network: requests go through ASGITransport straight into the app
    - Settings cache cleared around each test so env overrides take effect

Design Decisions:
    - AsyncClient over TestClient: matches the async route handlers and pytest-asyncio auto mode
"""

import pytest
from httpx import ASGITransport, AsyncClient

from defense_desk.config import get_settings
from defense_desk.main import app


@pytest.fixture
async def client():
    get_settings.cache_clear()
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    get_settings.cache_clear()


@pytest.fixture
def registration_rows():
    """Rows shaped like the stored procedure output for one session."""
    return [
        {
            "id": 1, "session_id": 7, "student_code": "SV001",
            "student_name": "Nguyen An", "class_code": "CNTT1",
            "report_status": "reporting", "supervisor_name": "Dr. Tran",
            "project_title": "Library Portal", "internship_company_name": "FPT",
            "major_name": "Software Engineering",
        },
        {
            "id": 2, "session_id": 7, "student_code": "SV002",
            "student_name": "Le Binh", "class_code": "CNTT1",
            "report_status": "withdrawn", "supervisor_name": "Dr. Tran",
            "project_title": "Library Portal", "internship_company_name": "FPT",
            "major_name": "Software Engineering",
        },
        {
            "id": 3, "session_id": 7, "student_code": "SV003",
            "student_name": "Pham Chi", "class_name": "HTTT2",
            "graduation_status": "exempted", "supervisorName": "Dr. Hoang",
            "projectTitle": "Clinic Scheduler",
            "internship_companyName": "Viettel",
            "major_name": "Information Systems",
        },
        {
            "id": 4, "session_id": 7, "student_id": 44,
            "student_name": "Vo Dung", "class_code": "CNTT2",
            "report_status": "not_yet_reporting",
        },
    ]
