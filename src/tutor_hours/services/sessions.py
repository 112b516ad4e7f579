"""Draft management for tutoring sessions."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from tutor_hours.domain.identity import Identity
from tutor_hours.domain.results import (
    Deleted,
    InvalidTransition,
    NotEligible,
    NotFound,
    ValidationFailed,
)
from tutor_hours.domain.sessions import (
    DraftFields,
    SessionFilter,
    SessionStatus,
    TutorSession,
)
from tutor_hours.domain.stats import SessionStatRow
from tutor_hours.services.lifecycle import (
    ADMIN_ONLY_MESSAGE,
    SessionEvent,
    Transition,
    apply_transition,
    check_transition,
    describe,
    not_eligible_message,
    requires_admin,
)
from tutor_hours.services.validation import validate_draft_fields

_logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Persistence interface for tutoring sessions."""

    def create_session(
        self, owner: Identity, fields: DraftFields, now: datetime
    ) -> TutorSession:
        """Insert a new draft and return it."""

    def get_session(self, session_id: UUID) -> TutorSession | None:
        """Return a session by id, if present."""

    def list_sessions(self, session_filter: SessionFilter) -> list[TutorSession]:
        """Return matching sessions, newest date first, ties in insertion order."""

    def update_session_if_status(
        self, session: TutorSession, expected_status: SessionStatus
    ) -> TutorSession | None:
        """Persist the session only if its stored status still matches."""

    def delete_session_if_status(
        self, session_id: UUID, owner_id: UUID, expected_status: SessionStatus
    ) -> bool:
        """Delete an owned session only if its stored status still matches."""

    def list_stat_rows(self) -> list[SessionStatRow]:
        """Return the status, hours and tutor email of every session."""


class SubmissionNotifier(Protocol):
    """Side-effect hook invoked after a draft is submitted."""

    async def notify(self, session: TutorSession) -> None:
        """Announce a newly submitted session."""


def utcnow() -> datetime:
    """Return the current UTC time."""
    return datetime.now(tz=UTC)


def scope_filter(session_filter: SessionFilter, viewer: Identity) -> SessionFilter:
    """Restrict a filter to the viewer's own sessions unless they are an admin."""
    if viewer.is_admin:
        return session_filter
    return replace(session_filter, owner_id=viewer.id)


@dataclass
class TutorSessionService:
    """Owner-facing operations on session drafts."""

    repository: SessionRepository
    notifier: SubmissionNotifier
    clock: Callable[[], datetime] = field(default=utcnow)

    def create_draft(
        self, owner: Identity, raw: Mapping[str, object]
    ) -> TutorSession | ValidationFailed:
        """Validate input and store it as a new draft."""
        now = self.clock()
        fields = validate_draft_fields(raw, now.date())
        if isinstance(fields, ValidationFailed):
            return fields
        session = self.repository.create_session(owner, fields, now)
        _logger.info("Draft created: session=%s owner=%s", session.id, owner.id)
        return session

    def edit_draft(
        self, session_id: UUID, owner: Identity, raw: Mapping[str, object]
    ) -> TutorSession | ValidationFailed | NotEligible:
        """Replace the editable fields of an owned draft."""
        now = self.clock()
        fields = validate_draft_fields(raw, now.date())
        if isinstance(fields, ValidationFailed):
            return fields
        resolved = resolve_transition(
            self.repository, session_id, SessionEvent.EDIT, owner
        )
        if isinstance(resolved, NotEligible):
            return resolved
        session, transition = resolved
        updated = apply_transition(session, transition, now, fields=fields)
        stored = self.repository.update_session_if_status(updated, transition.source)
        if stored is None:
            return NotEligible(reason=not_eligible_message(SessionEvent.EDIT))
        _logger.info("Draft edited: session=%s", session_id)
        return stored

    def delete_draft(self, session_id: UUID, owner: Identity) -> Deleted | NotEligible:
        """Remove an owned draft."""
        resolved = resolve_transition(
            self.repository, session_id, SessionEvent.DELETE, owner
        )
        if isinstance(resolved, NotEligible):
            return resolved
        _, transition = resolved
        if not self.repository.delete_session_if_status(
            session_id, owner.id, transition.source
        ):
            return NotEligible(reason=not_eligible_message(SessionEvent.DELETE))
        _logger.info("Draft deleted: session=%s", session_id)
        return Deleted(session_id=session_id)

    async def submit_draft(
        self, session_id: UUID, owner: Identity
    ) -> TutorSession | NotEligible:
        """Submit an owned draft for review and notify admins."""
        resolved = resolve_transition(
            self.repository, session_id, SessionEvent.SUBMIT, owner
        )
        if isinstance(resolved, NotEligible):
            return resolved
        session, transition = resolved
        updated = apply_transition(session, transition, self.clock())
        stored = self.repository.update_session_if_status(updated, transition.source)
        if stored is None:
            return NotEligible(reason=not_eligible_message(SessionEvent.SUBMIT))
        _logger.info("Session submitted: session=%s", session_id)
        try:
            await self.notifier.notify(stored)
        except Exception:
            _logger.warning(
                "Submission notification failed: session=%s", session_id, exc_info=True
            )
        return stored

    def get_session(
        self, session_id: UUID, viewer: Identity
    ) -> TutorSession | NotFound:
        """Return a session visible to the viewer."""
        session = self.repository.get_session(session_id)
        if session is None or not (viewer.is_admin or session.owner_id == viewer.id):
            return NotFound(session_id=session_id)
        return session

    def list_sessions(
        self, session_filter: SessionFilter, viewer: Identity
    ) -> list[TutorSession]:
        """Return sessions matching the filter within the viewer's scope."""
        return self.repository.list_sessions(scope_filter(session_filter, viewer))


def resolve_transition(
    repository: SessionRepository,
    session_id: UUID,
    event: SessionEvent,
    actor: Identity,
) -> tuple[TutorSession, Transition] | NotEligible:
    """Load a session and check that the actor may apply the event to it."""
    if requires_admin(event) and not actor.is_admin:
        return NotEligible(reason=ADMIN_ONLY_MESSAGE)
    session = repository.get_session(session_id)
    if session is None:
        return NotEligible(reason=not_eligible_message(event))
    transition = check_transition(session, event, actor)
    if isinstance(transition, InvalidTransition):
        return NotEligible(reason=describe(transition))
    if isinstance(transition, NotEligible):
        return transition
    return session, transition
