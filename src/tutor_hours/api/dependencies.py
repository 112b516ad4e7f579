"""Request dependencies: gateway token, acting identity and role gates."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status

from tutor_hours.domain.identity import ROLES, Identity

if TYPE_CHECKING:
    from tutor_hours.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the application."""
    return request.app.state.container


def _get_api_token(request: Request) -> str:
    return get_container(request).settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests come from the trusted auth gateway."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


async def get_identity(
    x_user_id: str | None = Header(default=None),
    x_user_name: str | None = Header(default=None),
    x_user_email: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
    _: None = Depends(require_api_token),
) -> Identity:
    """Build the acting identity from gateway-supplied headers."""
    if not (x_user_id and x_user_name and x_user_email and x_user_role):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    if x_user_role not in ROLES:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    try:
        user_id = UUID(x_user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED) from exc
    return Identity(id=user_id, name=x_user_name, email=x_user_email, role=x_user_role)


async def require_admin(identity: Identity = Depends(get_identity)) -> Identity:
    """Allow only admin identities through."""
    if not identity.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN)
    return identity
