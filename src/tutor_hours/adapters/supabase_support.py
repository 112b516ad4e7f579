"""Helpers shared by the Supabase repositories."""

from datetime import datetime

import httpx
from postgrest.exceptions import APIError

from tutor_hours.domain.errors import StoreUnavailableError

# PostgREST codes for a database it cannot reach or a stale schema cache.
_UNAVAILABLE_CODES = frozenset({"PGRST000", "PGRST001", "PGRST002", "PGRST003"})


def execute(query):  # type: ignore[no-untyped-def]  # noqa: ANN001, ANN201
    """Run a PostgREST query, reporting transport failures as store outages."""
    try:
        return query.execute()
    except httpx.HTTPError as exc:
        raise StoreUnavailableError(str(exc)) from exc
    except APIError as exc:
        if is_unavailable(exc):
            raise StoreUnavailableError(str(exc)) from exc
        raise


def is_unavailable(exc: APIError) -> bool:
    """Return True for gateway 5xx responses and PostgREST connection errors."""
    code = str(exc.code or "")
    if code in _UNAVAILABLE_CODES:
        return True
    return len(code) == 3 and code.isdigit() and code.startswith("5")


def parse_timestamp(raw: object) -> datetime | None:
    """Parse an ISO timestamp column, treating blanks as NULL."""
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None
