"""
Custom exception hierarchy for the Discipline Table.

Rule: every HTTP error has a machine-readable `code` string so clients
can branch on it without parsing English messages.
"""
from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------

class DisciplineException(Exception):
    """Base class for all application-level errors."""
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class HabitNotFoundError(DisciplineException):
    http_status = status.HTTP_404_NOT_FOUND
    code = "HABIT_NOT_FOUND"

    def __init__(self, habit_id: str):
        super().__init__(
            message=f"Habit {habit_id} does not exist.",
            details={"habit_id": habit_id},
        )


class ImportParseError(DisciplineException):
    """The imported document is not valid JSON."""
    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "IMPORT_PARSE_ERROR"

    def __init__(self, reason: str):
        super().__init__(
            message="Failed to parse JSON.",
            details={"reason": reason},
        )


class ImportShapeError(DisciplineException):
    """The imported JSON lacks `habits` / `checks` or has the wrong types."""
    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "IMPORT_SHAPE_ERROR"

    def __init__(self, errors: list[dict[str, str]] | None = None):
        super().__init__(
            message="Invalid JSON format: expected `habits` list and `checks` mapping.",
            details={"errors": errors} if errors else {},
        )


class PersistenceError(DisciplineException):
    """Storage read/write failed. Logged and swallowed by the tracker."""
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "PERSISTENCE_ERROR"

    def __init__(self, operation: str, reason: str):
        super().__init__(
            message=f"Persistence {operation} failed: {reason}",
            details={"operation": operation},
        )


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

async def discipline_exception_handler(
    request: Request, exc: DisciplineException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_dict(),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return structured 422 with machine-readable field errors."""
    field_errors = []
    for error in exc.errors():
        field_errors.append({
            "field": ".".join(str(loc) for loc in error["loc"] if loc != "body"),
            "message": error["msg"],
            "type": error["type"],
        })
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "code": "VALIDATION_ERROR",
            "message": "Request validation failed.",
            "details": {"errors": field_errors},
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred.",
        },
    )
