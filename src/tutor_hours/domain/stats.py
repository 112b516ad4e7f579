"""Domain models for session statistics."""

from dataclasses import dataclass, field

from tutor_hours.domain.sessions import SessionStatus


@dataclass(frozen=True)
class SessionStatRow:
    """Minimal projection of a session used for aggregation."""

    status: SessionStatus
    hours: float
    tutor_email: str


@dataclass(frozen=True)
class TutorHours:
    """Hours and session count for one tutor email."""

    tutor_email: str
    total_hours: float
    session_count: int


@dataclass(frozen=True)
class SessionStats:
    """Aggregate counts and hours across all sessions."""

    total: int = 0
    draft: int = 0
    submitted: int = 0
    approved: int = 0
    rejected: int = 0
    total_hours: float = 0.0
    hours_by_tutor: list[TutorHours] = field(default_factory=list)
