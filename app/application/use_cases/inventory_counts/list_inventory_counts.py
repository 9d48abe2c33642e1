"""Use case for listing inventory counts."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import InventoryCount
from app.infrastructure.repositories import InventoryCountRepository


def list_inventory_counts(
    session: Session, *, article_id: str | None = None
) -> Sequence[InventoryCount]:
    """Return every count, newest first, optionally for one article only."""

    return InventoryCountRepository(session).list(article_id=article_id)
