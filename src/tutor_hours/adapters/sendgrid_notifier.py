"""SendGrid email adapter for submission notifications."""

from dataclasses import dataclass

import httpx

from tutor_hours.domain.sessions import TutorSession
from tutor_hours.services.notifications import (
    SUBMISSION_SUBJECT,
    format_submission_message,
)

SENDGRID_SEND_URL = "https://api.sendgrid.com/v3/mail/send"


@dataclass
class HttpxSendGridNotifier:
    """Send submission emails through the SendGrid v3 API using httpx."""

    api_key: str
    from_email: str
    recipients: list[str]
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, api_key: str, from_email: str, recipients: list[str]
    ) -> "HttpxSendGridNotifier":
        """Create a notifier with a managed httpx session."""
        return cls(
            api_key=api_key,
            from_email=from_email,
            recipients=recipients,
            http_client=httpx.AsyncClient(),
        )

    async def notify(self, session: TutorSession) -> None:
        """Email every configured admin about a submitted session."""
        if not self.recipients:
            return
        payload: dict[str, object] = {
            "personalizations": [
                {"to": [{"email": email} for email in self.recipients]}
            ],
            "from": {"email": self.from_email},
            "subject": SUBMISSION_SUBJECT,
            "content": [
                {"type": "text/plain", "value": format_submission_message(session)}
            ],
        }
        response = await self.http_client.post(
            SENDGRID_SEND_URL,
            json=payload,
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=10,
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()
