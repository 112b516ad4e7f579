"""Request models and response serializers for the HTTP API."""

from datetime import date

from fastapi import Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from tutor_hours.domain.results import NotEligible, NotFound, ValidationFailed
from tutor_hours.domain.reviews import AdminReviewLog
from tutor_hours.domain.sessions import SessionFilter, SessionStatus, TutorSession
from tutor_hours.domain.stats import SessionStats


class DraftRequest(BaseModel):
    """Owner-supplied session fields; checked by the validation service."""

    date: str | None = None
    location: str | None = None
    description: str | None = None
    hours: float | str | None = None


class ReviewRequest(BaseModel):
    """Optional reviewer comment."""

    note: str | None = None


def session_filter_params(
    status: SessionStatus | None = Query(default=None),
    tutor: str | None = Query(default=None),
    date_from: date | None = Query(default=None),
    date_to: date | None = Query(default=None),
) -> SessionFilter:
    """Build a session filter from query parameters."""
    return SessionFilter(
        status=status,
        tutor_name_contains=tutor or None,
        date_from=date_from,
        date_to=date_to,
    )


def error_response(result: ValidationFailed | NotEligible | NotFound) -> JSONResponse:
    """Map an expected failure to an HTTP response."""
    if isinstance(result, ValidationFailed):
        return JSONResponse(status_code=422, content={"errors": result.errors})
    if isinstance(result, NotFound):
        return JSONResponse(status_code=404, content={"detail": "Session not found"})
    return JSONResponse(status_code=409, content={"detail": result.reason})


def serialize_session(session: TutorSession) -> dict[str, object]:
    """Render a session as JSON-ready data."""
    return {
        "id": str(session.id),
        "owner_id": str(session.owner_id),
        "tutor_name": session.tutor_name,
        "tutor_email": session.tutor_email,
        "date": session.date.isoformat(),
        "location": session.location,
        "description": session.description,
        "hours": session.hours,
        "status": str(session.status),
        "submitted_at": session.submitted_at.isoformat()
        if session.submitted_at
        else None,
        "reviewed_at": session.reviewed_at.isoformat() if session.reviewed_at else None,
        "review_note": session.review_note,
        "created_at": session.created_at.isoformat(),
        "updated_at": session.updated_at.isoformat(),
    }


def serialize_review_log(log: AdminReviewLog) -> dict[str, object]:
    """Render an audit entry as JSON-ready data."""
    return {
        "id": str(log.id),
        "admin_id": str(log.admin_id),
        "admin_name": log.admin_name,
        "admin_email": log.admin_email,
        "session_id": str(log.session_id),
        "action": str(log.action),
        "note": log.note,
        "timestamp": log.timestamp.isoformat(),
    }


def serialize_stats(stats: SessionStats) -> dict[str, object]:
    """Render session statistics as JSON-ready data."""
    return {
        "total": stats.total,
        "draft": stats.draft,
        "submitted": stats.submitted,
        "approved": stats.approved,
        "rejected": stats.rejected,
        "total_hours": stats.total_hours,
        "hours_by_tutor": [
            {
                "tutor_email": entry.tutor_email,
                "total_hours": entry.total_hours,
                "session_count": entry.session_count,
            }
            for entry in stats.hours_by_tutor
        ],
    }
