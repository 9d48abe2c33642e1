"""Use case for updating user information."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import ChangeEvent, ResourceType, User
from app.domain.exceptions import ConflictError, NotFoundError
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash

from .validators import ensure_valid_name, ensure_valid_role


def update_user(
    session: Session,
    publisher: EventPublisher,
    *,
    user_id: str,
    name: str | None = None,
    role: str | None = None,
    email: str | None = None,
    password: str | None = None,
    is_active: bool | None = None,
) -> User:
    """Update the provided user with the new values; ``None`` keeps a field."""

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise NotFoundError("Användaren hittades inte")

    new_name = current_user.name
    if name is not None and name != current_user.name:
        new_name = ensure_valid_name(name)
        existing = repository.get_by_name(new_name)
        if existing and existing.id != user_id:
            raise ConflictError(f"Användaren {new_name} finns redan")

    updated_user = replace(
        current_user,
        name=new_name,
        role=ensure_valid_role(role) if role is not None else current_user.role,
        email=email if email is not None else current_user.email,
        is_active=is_active if is_active is not None else current_user.is_active,
    )

    if password:
        updated_user = replace(updated_user, password=get_password_hash(password))

    saved = repository.update(updated_user)
    publisher.publish(ChangeEvent.updated(ResourceType.USER, saved))
    return saved
