"""Supabase-backed tutoring session repository."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from tutor_hours.adapters.supabase_support import execute, parse_timestamp
from tutor_hours.domain.identity import Identity
from tutor_hours.domain.sessions import (
    DraftFields,
    SessionFilter,
    SessionStatus,
    TutorSession,
)
from tutor_hours.domain.stats import SessionStatRow
from tutor_hours.services.sessions import SessionRepository

_TABLE = "tutor_sessions"
_COLUMNS = (
    "id, owner_id, tutor_name, tutor_email, date, location, description, hours, "
    "status, submitted_at, reviewed_at, review_note, created_at, updated_at"
)


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for tutoring sessions."""

    client: Client

    def create_session(
        self, owner: Identity, fields: DraftFields, now: datetime
    ) -> TutorSession:
        """Insert a draft row and return it."""
        response = execute(
            self.client.table(_TABLE).insert(
                {
                    "owner_id": str(owner.id),
                    "tutor_name": owner.name,
                    "tutor_email": owner.email,
                    "date": fields.date.isoformat(),
                    "location": fields.location,
                    "description": fields.description,
                    "hours": fields.hours,
                    "status": SessionStatus.DRAFT.value,
                    "created_at": now.isoformat(),
                    "updated_at": now.isoformat(),
                }
            )
        )
        if not response.data:
            raise RuntimeError("Failed to create session")
        return _parse_session(response.data[0])

    def get_session(self, session_id: UUID) -> TutorSession | None:
        """Return a session by id, if present."""
        response = execute(
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .eq("id", str(session_id))
            .limit(1)
        )
        if not response.data:
            return None
        return _parse_session(response.data[0])

    def list_sessions(self, session_filter: SessionFilter) -> list[TutorSession]:
        """Return matching sessions, newest date first."""
        query = self.client.table(_TABLE).select(_COLUMNS)
        if session_filter.status is not None:
            query = query.eq("status", session_filter.status.value)
        if session_filter.tutor_name_contains:
            pattern = _escape_like(session_filter.tutor_name_contains)
            query = query.ilike("tutor_name", f"%{pattern}%")
        if session_filter.date_from is not None:
            query = query.gte("date", session_filter.date_from.isoformat())
        if session_filter.date_to is not None:
            query = query.lte("date", session_filter.date_to.isoformat())
        if session_filter.owner_id is not None:
            query = query.eq("owner_id", str(session_filter.owner_id))
        response = execute(
            query.order("date", desc=True).order("created_at", desc=False)
        )
        return [_parse_session(row) for row in response.data or []]

    def update_session_if_status(
        self, session: TutorSession, expected_status: SessionStatus
    ) -> TutorSession | None:
        """Write the session only while its stored status is unchanged."""
        response = execute(
            self.client.table(_TABLE)
            .update(
                {
                    "date": session.date.isoformat(),
                    "location": session.location,
                    "description": session.description,
                    "hours": session.hours,
                    "status": session.status.value,
                    "submitted_at": _isoformat(session.submitted_at),
                    "reviewed_at": _isoformat(session.reviewed_at),
                    "review_note": session.review_note,
                    "updated_at": session.updated_at.isoformat(),
                }
            )
            .eq("id", str(session.id))
            .eq("status", expected_status.value)
        )
        if not response.data:
            return None
        return _parse_session(response.data[0])

    def delete_session_if_status(
        self, session_id: UUID, owner_id: UUID, expected_status: SessionStatus
    ) -> bool:
        """Delete an owned session while its stored status is unchanged."""
        response = execute(
            self.client.table(_TABLE)
            .delete()
            .eq("id", str(session_id))
            .eq("owner_id", str(owner_id))
            .eq("status", expected_status.value)
        )
        return bool(response.data)

    def list_stat_rows(self) -> list[SessionStatRow]:
        """Return the columns needed for statistics."""
        response = execute(
            self.client.table(_TABLE).select("status, hours, tutor_email")
        )
        return [
            SessionStatRow(
                status=SessionStatus(row["status"]),
                hours=float(row.get("hours", 0.0)),
                tutor_email=str(row.get("tutor_email", "")),
            )
            for row in response.data or []
        ]


def _escape_like(value: str) -> str:
    return re.sub(r"([\\%_])", r"\\\1", value)


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def _parse_session(row: dict[str, object]) -> TutorSession:
    created_at = parse_timestamp(row.get("created_at")) or datetime.min
    return TutorSession(
        id=UUID(str(row["id"])),
        owner_id=UUID(str(row["owner_id"])),
        tutor_name=str(row["tutor_name"]),
        tutor_email=str(row["tutor_email"]),
        date=date.fromisoformat(str(row["date"])[:10]),
        location=str(row["location"]),
        description=str(row["description"]),
        hours=float(row["hours"]),
        status=SessionStatus(row["status"]),
        submitted_at=parse_timestamp(row.get("submitted_at")),
        reviewed_at=parse_timestamp(row.get("reviewed_at")),
        review_note=row.get("review_note"),
        created_at=created_at,
        updated_at=parse_timestamp(row.get("updated_at")) or created_at,
    )
