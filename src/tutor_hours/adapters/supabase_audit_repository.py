"""Supabase repository for admin review logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from tutor_hours.adapters.supabase_support import execute, parse_timestamp
from tutor_hours.domain.identity import Identity
from tutor_hours.domain.reviews import AdminReviewLog, ReviewAction
from tutor_hours.services.audit import AuditRepository

_TABLE = "admin_review_logs"


@dataclass
class SupabaseAuditRepository(AuditRepository):
    """Supabase-backed append-only review log."""

    client: Client

    def create_review_log(  # noqa: PLR0913
        self,
        admin: Identity,
        session_id: UUID,
        action: ReviewAction,
        note: str | None,
        timestamp: datetime,
    ) -> AdminReviewLog:
        """Insert a review log row and return it."""
        response = execute(
            self.client.table(_TABLE).insert(
                {
                    "admin_id": str(admin.id),
                    "admin_name": admin.name,
                    "admin_email": admin.email,
                    "session_id": str(session_id),
                    "action": action.value,
                    "note": note,
                    "timestamp": timestamp.isoformat(),
                }
            )
        )
        if not response.data:
            raise RuntimeError("Failed to create review log")
        return _parse_log(response.data[0])

    def list_review_logs(self, session_id: UUID) -> list[AdminReviewLog]:
        """Return review logs for a session, newest first."""
        response = execute(
            self.client.table(_TABLE)
            .select("*")
            .eq("session_id", str(session_id))
            .order("timestamp", desc=True)
        )
        return [_parse_log(row) for row in response.data or []]


def _parse_log(row: dict[str, object]) -> AdminReviewLog:
    return AdminReviewLog(
        id=UUID(str(row["id"])),
        admin_id=UUID(str(row["admin_id"])),
        admin_name=str(row["admin_name"]),
        admin_email=str(row["admin_email"]),
        session_id=UUID(str(row["session_id"])),
        action=ReviewAction(row["action"]),
        note=row.get("note"),
        timestamp=parse_timestamp(row.get("timestamp")) or datetime.min,
    )
