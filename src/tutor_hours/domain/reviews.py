"""Domain models for admin review audit entries."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class ReviewAction(StrEnum):
    """Decision recorded by an admin."""

    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class AdminReviewLog:
    """Append-only record of a single admin decision."""

    id: UUID
    admin_id: UUID
    admin_name: str
    admin_email: str
    session_id: UUID
    action: ReviewAction
    note: str | None
    timestamp: datetime
