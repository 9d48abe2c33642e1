"""Use case for registering that a user is active."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import ChangeEvent, ResourceType, User
from app.domain.exceptions import NotFoundError
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import UserRepository
from app.utils import now_in_app_timezone


def record_activity(session: Session, publisher: EventPublisher, user_id: str) -> User:
    """Stamp ``last_active`` and mark the user active."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise NotFoundError("Användaren hittades inte")

    saved = repository.update(
        replace(user, last_active=now_in_app_timezone(), is_active=True)
    )
    publisher.publish(ChangeEvent.updated(ResourceType.USER, saved))
    return saved
