"""Use case for creating users."""

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import ROLE_USER, ChangeEvent, ResourceType, User
from app.domain.exceptions import ConflictError
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash

from .validators import ensure_valid_name, ensure_valid_role


def create_user(
    session: Session,
    publisher: EventPublisher,
    *,
    name: str,
    role: str = ROLE_USER,
    email: str | None = None,
    password: str | None = None,
    is_active: bool = True,
) -> User:
    """Create a new user ensuring unique names.

    Users created without a password get the configured default one.
    """

    repository = UserRepository(session)
    name = ensure_valid_name(name)
    if repository.get_by_name(name):
        raise ConflictError(f"Användaren {name} finns redan")

    hashed_password = get_password_hash(password or get_settings().default_user_password)
    user = User(
        id=None,
        name=name,
        role=ensure_valid_role(role),
        email=email,
        password=hashed_password,
        is_active=is_active,
        last_active=None,
    )

    created = repository.create(user)
    publisher.publish(ChangeEvent.created(ResourceType.USER, created))
    return created
