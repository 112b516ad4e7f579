"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from tutor_hours.adapters.sendgrid_notifier import HttpxSendGridNotifier
from tutor_hours.adapters.supabase_audit_repository import SupabaseAuditRepository
from tutor_hours.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from tutor_hours.config import Settings, parse_email_list
from tutor_hours.services.audit import AuditService
from tutor_hours.services.notifications import LoggingSubmissionNotifier
from tutor_hours.services.reports import ReportService
from tutor_hours.services.reviews import ReviewService
from tutor_hours.services.sessions import SubmissionNotifier, TutorSessionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_service: TutorSessionService
    review_service: ReviewService
    report_service: ReportService
    audit_service: AuditService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    session_repository = SupabaseSessionRepository(supabase_client)
    audit_repository = SupabaseAuditRepository(supabase_client)

    sendgrid_notifier: HttpxSendGridNotifier | None = None
    notifier: SubmissionNotifier
    if resolved_settings.sendgrid_api_key:
        sendgrid_notifier = HttpxSendGridNotifier.create(
            api_key=resolved_settings.sendgrid_api_key,
            from_email=resolved_settings.notification_from_email,
            recipients=parse_email_list(resolved_settings.admin_notification_emails),
        )
        notifier = sendgrid_notifier
    else:
        notifier = LoggingSubmissionNotifier()

    audit_service = AuditService(audit_repository)
    session_service = TutorSessionService(session_repository, notifier)
    review_service = ReviewService(session_repository, audit_service)
    report_service = ReportService(session_repository)

    async def close_resources() -> None:
        if sendgrid_notifier is not None:
            await sendgrid_notifier.close()

    return AppContainer(
        settings=resolved_settings,
        session_service=session_service,
        review_service=review_service,
        report_service=report_service,
        audit_service=audit_service,
        close_resources=close_resources,
    )
