"""Owner-facing session endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from tutor_hours.api.dependencies import get_container, get_identity
from tutor_hours.api.schemas import (
    DraftRequest,
    error_response,
    serialize_session,
    session_filter_params,
)
from tutor_hours.domain.identity import Identity
from tutor_hours.domain.results import NotEligible, NotFound, ValidationFailed
from tutor_hours.domain.sessions import SessionFilter

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("")
async def list_sessions(
    request: Request,
    session_filter: SessionFilter = Depends(session_filter_params),
    identity: Identity = Depends(get_identity),
) -> dict[str, object]:
    """Return sessions visible to the caller."""
    service = get_container(request).session_service
    sessions = service.list_sessions(session_filter, identity)
    return {"sessions": [serialize_session(session) for session in sessions]}


@router.post("", status_code=status.HTTP_201_CREATED, response_model=None)
async def create_session(
    payload: DraftRequest,
    request: Request,
    identity: Identity = Depends(get_identity),
) -> dict[str, object] | JSONResponse:
    """Save a new draft session."""
    service = get_container(request).session_service
    result = service.create_draft(identity, payload.model_dump())
    if isinstance(result, ValidationFailed):
        return error_response(result)
    return serialize_session(result)


@router.get("/{session_id}", response_model=None)
async def get_session(
    session_id: UUID,
    request: Request,
    identity: Identity = Depends(get_identity),
) -> dict[str, object] | JSONResponse:
    """Return one session."""
    service = get_container(request).session_service
    result = service.get_session(session_id, identity)
    if isinstance(result, NotFound):
        return error_response(result)
    return serialize_session(result)


@router.put("/{session_id}", response_model=None)
async def edit_session(
    session_id: UUID,
    payload: DraftRequest,
    request: Request,
    identity: Identity = Depends(get_identity),
) -> dict[str, object] | JSONResponse:
    """Update a draft session."""
    service = get_container(request).session_service
    result = service.edit_draft(session_id, identity, payload.model_dump())
    if isinstance(result, ValidationFailed | NotEligible):
        return error_response(result)
    return serialize_session(result)


@router.delete("/{session_id}", response_model=None)
async def delete_session(
    session_id: UUID,
    request: Request,
    identity: Identity = Depends(get_identity),
) -> dict[str, object] | JSONResponse:
    """Delete a draft session."""
    service = get_container(request).session_service
    result = service.delete_draft(session_id, identity)
    if isinstance(result, NotEligible):
        return error_response(result)
    return {"status": "deleted", "id": str(result.session_id)}


@router.post("/{session_id}/submit", response_model=None)
async def submit_session(
    session_id: UUID,
    request: Request,
    identity: Identity = Depends(get_identity),
) -> dict[str, object] | JSONResponse:
    """Submit a draft for admin review."""
    service = get_container(request).session_service
    result = await service.submit_draft(session_id, identity)
    if isinstance(result, NotEligible):
        return error_response(result)
    return serialize_session(result)
