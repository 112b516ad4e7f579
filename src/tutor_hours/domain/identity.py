"""Identity of the acting user."""

from dataclasses import dataclass
from uuid import UUID

ROLE_TUTOR = "tutor"
ROLE_ADMIN = "admin"
ROLES = frozenset({ROLE_TUTOR, ROLE_ADMIN})


@dataclass(frozen=True)
class Identity:
    """Authenticated user as supplied by the auth layer."""

    id: UUID
    name: str
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        """Return True for admin identities."""
        return self.role == ROLE_ADMIN
