"""Use case for removing a logged count."""

from sqlalchemy.orm import Session

from app.domain.entities import ChangeEvent, ResourceType
from app.domain.exceptions import NotFoundError
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import InventoryCountRepository


def delete_inventory_count(
    session: Session, publisher: EventPublisher, inventory_count_id: str
) -> str:
    """Delete the count and return the id of the article it belonged to."""

    repository = InventoryCountRepository(session)
    inventory_count = repository.get(inventory_count_id)
    if inventory_count is None or not repository.delete(inventory_count_id):
        raise NotFoundError("Inventeringen hittades inte")

    publisher.publish(
        ChangeEvent.deleted(
            ResourceType.INVENTORY_COUNT,
            inventory_count_id,
            article_id=inventory_count.article_id,
        )
    )
    return inventory_count.article_id
