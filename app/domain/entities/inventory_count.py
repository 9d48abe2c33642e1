"""Domain entity representing a single count logged against an article."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class InventoryCount:
    """Quantity a user counted for an article."""

    id: str | None
    article_id: str
    user_id: str
    count: int
    notes: str | None
    created_at: datetime | None


__all__ = ["InventoryCount"]
