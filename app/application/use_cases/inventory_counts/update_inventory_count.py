"""Use case for correcting a logged count."""

from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import ChangeEvent, InventoryCount, ResourceType
from app.domain.exceptions import NotFoundError, ValidationError
from app.infrastructure.realtime import EventPublisher
from app.infrastructure.repositories import InventoryCountRepository


def update_inventory_count(
    session: Session,
    publisher: EventPublisher,
    *,
    inventory_count_id: str,
    changes: dict[str, Any],
) -> InventoryCount:
    """Update ``count`` and/or ``notes``; fields missing from ``changes`` are kept.

    ``notes`` may be set to ``None`` explicitly to clear it.
    """

    unknown = set(changes) - {"count", "notes"}
    if unknown:
        raise ValidationError(f"Okända fält: {', '.join(sorted(unknown))}")
    if "count" in changes and (changes["count"] is None or changes["count"] < 0):
        raise ValidationError("Antalet kan inte vara negativt")

    repository = InventoryCountRepository(session)
    inventory_count = repository.get(inventory_count_id)
    if inventory_count is None:
        raise NotFoundError("Inventeringen hittades inte")

    saved = repository.update(replace(inventory_count, **changes))
    publisher.publish(ChangeEvent.updated(ResourceType.INVENTORY_COUNT, saved))
    return saved
