"""Submission notifications for admins."""

import logging
from dataclasses import dataclass

from tutor_hours.domain.sessions import TutorSession

_logger = logging.getLogger(__name__)

SUBMISSION_SUBJECT = "New Tutor Session Logged"


def format_submission_message(session: TutorSession) -> str:
    """Build the plain-text body announcing a submitted session."""
    return (
        "A new tutor session has been submitted for review.\n\n"
        f"Tutor: {session.tutor_name} <{session.tutor_email}>\n"
        f"Date: {session.date.isoformat()}\n"
        f"Location: {session.location}\n"
        f"Description: {session.description}\n"
        f"Hours: {session.hours:g}\n"
    )


@dataclass
class LoggingSubmissionNotifier:
    """Notifier used when no email provider is configured."""

    async def notify(self, session: TutorSession) -> None:
        """Log the submission instead of sending it."""
        _logger.info(
            "Submission notification skipped (no email provider): session=%s",
            session.id,
        )
