"""Error Handlers: map every failure to the single Defense Desk error envelope.

Invariants:
    - Domain errors and Pydantic request errors both render through build_error_envelope
    - Any field-level 400 carries details[] with "body.<name>" locations, whichever layer rejected it
    - Unhandled exceptions become 500 INTERNAL_ERROR without internal details

Design Decisions:
    - Pydantic errors converted to FieldIssue so clients parse one shape for all 400s
    - Domain errors logged at warning: they are caller mistakes, not service faults
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from defense_desk.core.errors import (
    DefenseDeskError, ErrorCategory, ErrorSeverity, FieldIssue,
    build_error_envelope,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Install domain, request-validation and catch-all handlers."""
    app.add_exception_handler(DefenseDeskError, _domain_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


async def _domain_error_handler(request: Request, exc: DefenseDeskError):
    logger.warning(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "session_id": exc.context.session_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _request_validation_handler(
    request: Request, exc: RequestValidationError,
):
    issues = request_field_issues(exc)
    logger.warning(
        f"Rejected request body on {request.url.path}: "
        f"{', '.join(issue.field for issue in issues)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=build_error_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=issues,
        ),
    )


async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=build_error_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def request_field_issues(exc: RequestValidationError) -> list[FieldIssue]:
    """Pydantic errors as FieldIssues, loc joined with dots (body.page_size)."""
    return [
        FieldIssue(
            field=".".join(str(loc) for loc in e["loc"]),
            message=e["msg"],
            type=e["type"],
        )
        for e in exc.errors()
    ]
