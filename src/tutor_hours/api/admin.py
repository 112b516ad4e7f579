"""Admin review and reporting endpoints."""

from __future__ import annotations

import time
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from tutor_hours.api.dependencies import get_container, require_admin
from tutor_hours.api.schemas import (
    ReviewRequest,
    error_response,
    serialize_review_log,
    serialize_session,
    serialize_stats,
    session_filter_params,
)
from tutor_hours.domain.identity import Identity  # noqa: TC001
from tutor_hours.domain.results import NotEligible, ValidationFailed
from tutor_hours.domain.sessions import SessionFilter  # noqa: TC001

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/sessions/{session_id}/approve", response_model=None)
async def approve_session(
    session_id: UUID,
    request: Request,
    payload: ReviewRequest | None = None,
    admin: Identity = Depends(require_admin),
) -> dict[str, object] | JSONResponse:
    """Approve a submitted session."""
    service = get_container(request).review_service
    note = payload.note if payload else None
    result = service.approve(session_id, admin, note)
    if isinstance(result, ValidationFailed | NotEligible):
        return error_response(result)
    return serialize_session(result)


@router.post("/sessions/{session_id}/reject", response_model=None)
async def reject_session(
    session_id: UUID,
    request: Request,
    payload: ReviewRequest | None = None,
    admin: Identity = Depends(require_admin),
) -> dict[str, object] | JSONResponse:
    """Reject a submitted session."""
    service = get_container(request).review_service
    note = payload.note if payload else None
    result = service.reject(session_id, admin, note)
    if isinstance(result, ValidationFailed | NotEligible):
        return error_response(result)
    return serialize_session(result)


@router.get("/sessions/{session_id}/reviews", dependencies=[Depends(require_admin)])
async def list_reviews(session_id: UUID, request: Request) -> dict[str, object]:
    """Return the review history of a session."""
    logs = get_container(request).audit_service.list_reviews(session_id)
    return {"reviews": [serialize_review_log(log) for log in logs]}


@router.get("/stats", response_model=None)
async def stats(
    request: Request, admin: Identity = Depends(require_admin)
) -> dict[str, object] | JSONResponse:
    """Return aggregate session statistics."""
    result = get_container(request).report_service.compute_stats(admin)
    if isinstance(result, NotEligible):
        return error_response(result)
    return serialize_stats(result)


@router.get("/export.csv")
async def export_csv(
    request: Request,
    session_filter: SessionFilter = Depends(session_filter_params),
    admin: Identity = Depends(require_admin),
) -> Response:
    """Download filtered sessions as CSV."""
    content = get_container(request).report_service.export_csv(session_filter, admin)
    filename = f"tutor-sessions-{int(time.time() * 1000)}.csv"
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
