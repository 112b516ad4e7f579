"""Lifecycle state machine for tutoring sessions.

Every event has exactly one legal source state:

    draft --submit--> submitted --approve--> approved
                                --reject---> rejected
    draft --edit--> draft
    draft --delete--> (removed)

``submitted_at`` and ``reviewed_at`` are write-once: they are stamped the
first time the session enters the matching state and carried over
unchanged by every later transition.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum

from tutor_hours.domain.identity import Identity
from tutor_hours.domain.results import InvalidTransition, NotEligible
from tutor_hours.domain.sessions import DraftFields, SessionStatus, TutorSession

DEFAULT_REJECT_NOTE = "No reason provided"


class SessionEvent(StrEnum):
    """Events that move a session through its lifecycle."""

    SUBMIT = "submit"
    APPROVE = "approve"
    REJECT = "reject"
    EDIT = "edit"
    DELETE = "delete"


@dataclass(frozen=True)
class Transition:
    """A legal lifecycle edge; ``target`` is None when the record is removed."""

    event: SessionEvent
    source: SessionStatus
    target: SessionStatus | None


TRANSITIONS: dict[SessionEvent, Transition] = {
    transition.event: transition
    for transition in (
        Transition(SessionEvent.SUBMIT, SessionStatus.DRAFT, SessionStatus.SUBMITTED),
        Transition(
            SessionEvent.APPROVE, SessionStatus.SUBMITTED, SessionStatus.APPROVED
        ),
        Transition(
            SessionEvent.REJECT, SessionStatus.SUBMITTED, SessionStatus.REJECTED
        ),
        Transition(SessionEvent.EDIT, SessionStatus.DRAFT, SessionStatus.DRAFT),
        Transition(SessionEvent.DELETE, SessionStatus.DRAFT, None),
    )
}

TERMINAL_STATUSES = frozenset({SessionStatus.APPROVED, SessionStatus.REJECTED})
_ADMIN_EVENTS = frozenset({SessionEvent.APPROVE, SessionEvent.REJECT})

ADMIN_ONLY_MESSAGE = "Only admins can review sessions"
_NOT_ELIGIBLE_MESSAGES = {
    SessionEvent.SUBMIT: "Session not found or already submitted",
    SessionEvent.APPROVE: "Session not found or not submitted",
    SessionEvent.REJECT: "Session not found or not submitted",
    SessionEvent.EDIT: "Session not found or cannot be edited",
    SessionEvent.DELETE: "Session not found or cannot be deleted",
}


def requires_admin(event: SessionEvent) -> bool:
    """Return True for events only admins may trigger."""
    return event in _ADMIN_EVENTS


def not_eligible_message(event: SessionEvent) -> str:
    """Return the message shared by missing, foreign and wrong-state sessions."""
    return _NOT_ELIGIBLE_MESSAGES[event]


def is_authorized(session: TutorSession, event: SessionEvent, actor: Identity) -> bool:
    """Return True when the actor may trigger the event on the session."""
    if requires_admin(event):
        return actor.is_admin
    return session.owner_id == actor.id


def check_transition(
    session: TutorSession, event: SessionEvent, actor: Identity
) -> Transition | InvalidTransition | NotEligible:
    """Resolve the transition for an event, enforcing role and state guards."""
    if not is_authorized(session, event, actor):
        if requires_admin(event):
            return NotEligible(reason=ADMIN_ONLY_MESSAGE)
        return NotEligible(reason=not_eligible_message(event))
    transition = TRANSITIONS[event]
    if session.status != transition.source:
        return InvalidTransition(current=str(session.status), event=str(event))
    return transition


def apply_transition(
    session: TutorSession,
    transition: Transition,
    now: datetime,
    *,
    fields: DraftFields | None = None,
    review_note: str | None = None,
) -> TutorSession:
    """Return the session as it looks after the transition."""
    if transition.target is None:
        raise ValueError("Removal transitions have no resulting session")
    changes: dict[str, object] = {"status": transition.target, "updated_at": now}
    if transition.event is SessionEvent.EDIT and fields is not None:
        changes.update(
            date=fields.date,
            location=fields.location,
            description=fields.description,
            hours=fields.hours,
        )
    if transition.target is SessionStatus.SUBMITTED and session.submitted_at is None:
        changes["submitted_at"] = now
    if transition.target in TERMINAL_STATUSES:
        if session.reviewed_at is None:
            changes["reviewed_at"] = now
        if transition.event is SessionEvent.REJECT:
            changes["review_note"] = review_note or DEFAULT_REJECT_NOTE
        else:
            changes["review_note"] = review_note
    return replace(session, **changes)


def describe(result: InvalidTransition) -> str:
    """Return a user-facing message for a rejected transition."""
    return not_eligible_message(SessionEvent(result.event))
