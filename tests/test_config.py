"""Tests for configuration helpers."""

from tutor_hours.config import Settings, parse_email_list


def test_parse_email_list() -> None:
    assert parse_email_list(None) == []
    assert parse_email_list("  ") == []
    assert parse_email_list("a@example.com, ,b@example.com ") == [
        "a@example.com",
        "b@example.com",
    ]


def test_settings_defaults(settings: Settings) -> None:
    assert settings.sendgrid_api_key is None
    assert settings.notification_from_email == "noreply@example.com"
