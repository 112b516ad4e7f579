"""Result kinds returned by core operations for expected failures."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class ValidationFailed:
    """Input was rejected; nothing was written."""

    errors: list[str]


@dataclass(frozen=True)
class NotEligible:
    """The record is not in a state (or scope) that allows the operation."""

    reason: str


@dataclass(frozen=True)
class NotFound:
    """No session with the given id is visible to the caller."""

    session_id: UUID


@dataclass(frozen=True)
class InvalidTransition:
    """The lifecycle does not allow the event from the current status."""

    current: str
    event: str


@dataclass(frozen=True)
class Deleted:
    """A draft was removed."""

    session_id: UUID
