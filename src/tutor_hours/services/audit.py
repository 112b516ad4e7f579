"""Audit logging service for admin review decisions."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from tutor_hours.domain.identity import Identity
from tutor_hours.domain.reviews import AdminReviewLog, ReviewAction


class AuditRepository(Protocol):
    """Persistence interface for the append-only review log."""

    def create_review_log(  # noqa: PLR0913
        self,
        admin: Identity,
        session_id: UUID,
        action: ReviewAction,
        note: str | None,
        timestamp: datetime,
    ) -> AdminReviewLog:
        """Append a review log row and return it."""

    def list_review_logs(self, session_id: UUID) -> list[AdminReviewLog]:
        """Return review logs for a session, newest first."""


@dataclass
class AuditService:
    """Service for recording and reading admin review decisions."""

    repository: AuditRepository

    def record_review(  # noqa: PLR0913
        self,
        admin: Identity,
        session_id: UUID,
        action: ReviewAction,
        note: str | None,
        timestamp: datetime,
    ) -> AdminReviewLog:
        """Persist one review decision."""
        return self.repository.create_review_log(
            admin=admin,
            session_id=session_id,
            action=action,
            note=note,
            timestamp=timestamp,
        )

    def list_reviews(self, session_id: UUID) -> list[AdminReviewLog]:
        """Return the review history of a session."""
        return self.repository.list_review_logs(session_id)
