"""Common validation helpers for user use cases."""

from app.domain.entities import ROLE_ADMIN, ROLE_USER
from app.domain.exceptions import ValidationError

ALLOWED_ROLES = (ROLE_USER, ROLE_ADMIN)


def ensure_valid_name(name: str) -> str:
    """Return ``name`` stripped or raise :class:`ValidationError` when empty."""

    normalized = name.strip()
    if not normalized:
        raise ValidationError("Namn måste anges")
    return normalized


def ensure_valid_role(role: str) -> str:
    if role not in ALLOWED_ROLES:
        raise ValidationError(f"Okänd roll: {role}")
    return role
