"""Reporting over tutoring sessions: statistics and CSV export."""

import csv
import io
from dataclasses import dataclass

from tutor_hours.domain.identity import Identity
from tutor_hours.domain.results import NotEligible
from tutor_hours.domain.sessions import SessionFilter, SessionStatus, TutorSession
from tutor_hours.domain.stats import SessionStats, TutorHours
from tutor_hours.services.sessions import SessionRepository, scope_filter

CSV_HEADER = [
    "Tutor Name",
    "Email",
    "Date",
    "Location",
    "Description",
    "Hours",
    "Status",
    "Submitted At",
    "Reviewed At",
    "Review Note",
]


@dataclass
class ReportService:
    """Read-only reports built on the session store."""

    repository: SessionRepository

    def compute_stats(self, viewer: Identity) -> SessionStats | NotEligible:
        """Return status counts, total hours and hours per tutor email."""
        if not viewer.is_admin:
            return NotEligible(reason="Only admins can view statistics")
        counts = dict.fromkeys(SessionStatus, 0)
        total_hours = 0.0
        by_tutor: dict[str, TutorHours] = {}
        rows = self.repository.list_stat_rows()
        for row in rows:
            counts[row.status] += 1
            total_hours += row.hours
            current = by_tutor.get(row.tutor_email)
            by_tutor[row.tutor_email] = TutorHours(
                tutor_email=row.tutor_email,
                total_hours=(current.total_hours if current else 0.0) + row.hours,
                session_count=(current.session_count if current else 0) + 1,
            )
        return SessionStats(
            total=len(rows),
            draft=counts[SessionStatus.DRAFT],
            submitted=counts[SessionStatus.SUBMITTED],
            approved=counts[SessionStatus.APPROVED],
            rejected=counts[SessionStatus.REJECTED],
            total_hours=total_hours,
            hours_by_tutor=sorted(
                by_tutor.values(), key=lambda entry: entry.total_hours, reverse=True
            ),
        )

    def export_csv(self, session_filter: SessionFilter, viewer: Identity) -> str:
        """Render the sessions visible to the viewer as a CSV document."""
        sessions = self.repository.list_sessions(scope_filter(session_filter, viewer))
        return render_csv(sessions)


def render_csv(sessions: list[TutorSession]) -> str:
    """Serialize sessions with minimal quoting, one row per session."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for session in sessions:
        writer.writerow(
            [
                session.tutor_name,
                session.tutor_email,
                session.date.isoformat(),
                session.location,
                session.description,
                f"{session.hours:g}",
                str(session.status),
                session.submitted_at.isoformat() if session.submitted_at else "",
                session.reviewed_at.isoformat() if session.reviewed_at else "",
                session.review_note or "",
            ]
        )
    return buffer.getvalue()
