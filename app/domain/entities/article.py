"""Domain entity representing a catalogued article."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Article:
    """An article stocked at a storage location."""

    id: str | None
    article_number: str
    description: str
    length: str
    location: str
    inventory_count: int | None
    notes: str | None
    is_inventoried: bool
    last_inventoried_by: str | None
    last_inventoried_at: datetime | None
    created_at: datetime | None

    def has_discrepancy(self) -> bool:
        """Return ``True`` when a worker left a note about the article."""

        return bool(self.notes and self.notes.strip())


__all__ = ["Article"]
