"""Domain models for tutoring sessions."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID


class SessionStatus(StrEnum):
    """Lifecycle states of a tutoring session."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class DraftFields:
    """Validated, owner-editable session fields."""

    date: date
    location: str
    description: str
    hours: float


@dataclass(frozen=True)
class TutorSession:
    """Represents a persisted tutoring session."""

    id: UUID
    owner_id: UUID
    tutor_name: str
    tutor_email: str
    date: date
    location: str
    description: str
    hours: float
    status: SessionStatus
    submitted_at: datetime | None
    reviewed_at: datetime | None
    review_note: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class SessionFilter:
    """Criteria for listing sessions."""

    status: SessionStatus | None = None
    tutor_name_contains: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    owner_id: UUID | None = None
