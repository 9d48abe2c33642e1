"""Domain entity representing a warehouse user."""

from dataclasses import dataclass
from datetime import datetime

ROLE_USER = "Användare"
ROLE_ADMIN = "Administratör"


@dataclass
class User:
    """Core attributes describing an application user."""

    id: str | None
    name: str
    role: str
    email: str | None
    password: str
    is_active: bool
    last_active: datetime | None

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.role == ROLE_ADMIN


__all__ = ["ROLE_ADMIN", "ROLE_USER", "User"]
