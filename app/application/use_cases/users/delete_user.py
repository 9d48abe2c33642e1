"""Use case for deleting a user."""

from sqlalchemy.orm import Session

from app.domain.entities import ChangeEvent, ResourceType
from app.domain.exceptions import NotFoundError
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import UserRepository


def delete_user(session: Session, publisher: EventPublisher, user_id: str) -> None:
    """Delete the specified user.

    Users referenced by counts or inventoried rows cannot be removed; the
    repository reports that as a conflict.
    """

    repository = UserRepository(session)
    if not repository.delete(user_id):
        raise NotFoundError("Användaren hittades inte")
    publisher.publish(ChangeEvent.deleted(ResourceType.USER, user_id))
