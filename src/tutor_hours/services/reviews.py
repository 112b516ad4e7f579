"""Admin review workflow: status transition plus audit entry."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from tutor_hours.domain.identity import Identity
from tutor_hours.domain.results import NotEligible, ValidationFailed
from tutor_hours.domain.reviews import ReviewAction
from tutor_hours.domain.sessions import TutorSession
from tutor_hours.services.audit import AuditService
from tutor_hours.services.lifecycle import (
    SessionEvent,
    apply_transition,
    not_eligible_message,
)
from tutor_hours.services.sessions import (
    SessionRepository,
    resolve_transition,
    utcnow,
)
from tutor_hours.services.validation import normalize_note

_logger = logging.getLogger(__name__)


@dataclass
class ReviewService:
    """Approves or rejects submitted sessions and records the decision."""

    session_repository: SessionRepository
    audit_service: AuditService
    clock: Callable[[], datetime] = field(default=utcnow)

    def approve(
        self, session_id: UUID, admin: Identity, note: str | None = None
    ) -> TutorSession | NotEligible | ValidationFailed:
        """Approve a submitted session."""
        return self._review(session_id, admin, SessionEvent.APPROVE, note)

    def reject(
        self, session_id: UUID, admin: Identity, note: str | None = None
    ) -> TutorSession | NotEligible | ValidationFailed:
        """Reject a submitted session; a missing note gets a default reason."""
        return self._review(session_id, admin, SessionEvent.REJECT, note)

    def _review(
        self,
        session_id: UUID,
        admin: Identity,
        event: SessionEvent,
        note: str | None,
    ) -> TutorSession | NotEligible | ValidationFailed:
        cleaned_note = normalize_note(note)
        if isinstance(cleaned_note, ValidationFailed):
            return cleaned_note
        resolved = resolve_transition(
            self.session_repository, session_id, event, admin
        )
        if isinstance(resolved, NotEligible):
            return resolved
        session, transition = resolved
        now = self.clock()
        updated = apply_transition(session, transition, now, review_note=cleaned_note)
        stored = self.session_repository.update_session_if_status(
            updated, transition.source
        )
        if stored is None:
            return NotEligible(reason=not_eligible_message(event))
        action = ReviewAction(stored.status)
        _logger.info("Session %s: session=%s admin=%s", action, session_id, admin.id)
        # The status change stands even if the audit write fails.
        try:
            self.audit_service.record_review(
                admin=admin,
                session_id=stored.id,
                action=action,
                note=stored.review_note,
                timestamp=now,
            )
        except Exception:
            _logger.warning(
                "Audit log write failed: session=%s action=%s",
                session_id,
                action,
                exc_info=True,
            )
        return stored
