"""Use case for logging a count against an article."""

from sqlalchemy.orm import Session

from app.domain.entities import ChangeEvent, InventoryCount, ResourceType
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import (
    ArticleRepository,
    InventoryCountRepository,
    UserRepository,
)


def record_article_count(
    session: Session,
    publisher: EventPublisher,
    *,
    article_id: str,
    user_id: str,
    count: int,
    notes: str | None = None,
) -> InventoryCount:
    """Create an inventory count of ``count`` for the article by the user."""

    if count < 0:
        raise ValidationError("Antalet kan inte vara negativt")
    if ArticleRepository(session).get(article_id) is None:
        raise NotFoundError("Artikeln hittades inte")
    if UserRepository(session).get(user_id) is None:
        raise NotFoundError("Användaren hittades inte")

    inventory_count = InventoryCountRepository(session).create(
        InventoryCount(
            id=None,
            article_id=article_id,
            user_id=user_id,
            count=count,
            notes=notes,
            created_at=None,
        )
    )
    publisher.publish(ChangeEvent.created(ResourceType.INVENTORY_COUNT, inventory_count))
    return inventory_count
