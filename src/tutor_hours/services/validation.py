"""Input validation for session fields and review notes."""

import math
from collections.abc import Mapping
from datetime import date, datetime, timedelta

from tutor_hours.domain.results import ValidationFailed
from tutor_hours.domain.sessions import DraftFields

LOCATION_MIN = 2
LOCATION_MAX = 200
DESCRIPTION_MIN = 10
DESCRIPTION_MAX = 2000
HOURS_MIN = 0.5
HOURS_MAX = 24.0
NOTE_MAX = 1000
FUTURE_GRACE = timedelta(days=1)


def validate_draft_fields(
    raw: Mapping[str, object], today: date
) -> DraftFields | ValidationFailed:
    """Validate raw draft input, collecting every problem before failing."""
    errors: list[str] = []
    session_date = _check_date(raw.get("date"), today, errors)
    location = _check_text(
        raw.get("location"), "Location", LOCATION_MIN, LOCATION_MAX, errors
    )
    description = _check_text(
        raw.get("description"),
        "Description",
        DESCRIPTION_MIN,
        DESCRIPTION_MAX,
        errors,
    )
    hours = _check_hours(raw.get("hours"), errors)
    if errors:
        return ValidationFailed(errors=errors)
    return DraftFields(
        date=session_date,
        location=location,
        description=description,
        hours=hours,
    )


def normalize_note(note: str | None) -> str | None | ValidationFailed:
    """Trim a review note; blank notes become None."""
    if note is None:
        return None
    cleaned = note.strip()
    if len(cleaned) > NOTE_MAX:
        return ValidationFailed(
            errors=[f"Review note must not exceed {NOTE_MAX} characters"]
        )
    return cleaned or None


def parse_date(value: object) -> date | None:
    """Parse a calendar date from a date, datetime or ISO string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _check_date(value: object, today: date, errors: list[str]) -> date:
    if value is None or value == "":
        errors.append("Date is required")
        return today
    parsed = parse_date(value)
    if parsed is None:
        errors.append("Invalid date format")
        return today
    if parsed > today + FUTURE_GRACE:
        errors.append("Date cannot be in the future")
    return parsed


def _check_text(
    value: object, label: str, minimum: int, maximum: int, errors: list[str]
) -> str:
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        errors.append(f"{label} is required")
    elif len(text) < minimum:
        errors.append(f"{label} must be at least {minimum} characters")
    elif len(text) > maximum:
        errors.append(f"{label} must not exceed {maximum} characters")
    return text


def _check_hours(value: object, errors: list[str]) -> float:
    hours = _to_number(value)
    if hours is None:
        errors.append("Hours is required and must be a number")
        return 0.0
    if hours < HOURS_MIN:
        errors.append(f"Hours must be at least {HOURS_MIN}")
    elif hours > HOURS_MAX:
        errors.append(f"Hours cannot exceed {HOURS_MAX:g}")
    elif not (hours * 2).is_integer():
        errors.append("Hours must be in increments of 0.5 (e.g., 0.5, 1.0, 1.5)")
    return hours


def _to_number(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number
