"""Domain entity representing a line of a customer order."""

from dataclasses import dataclass
from datetime import datetime

PICK_STATUS_PICKED = "Plockat"
PICK_STATUS_NOT_PICKED = "Ej plockat"


@dataclass
class OrderLine:
    """One article row of an order and its picking/inventory state."""

    id: str | None
    order_number: str
    article_number: str
    description: str
    length: str
    position: str | None
    quantity: int
    pick_status: str
    is_inventoried: bool
    inventoried_by: str | None
    inventoried_at: datetime | None
    inventoried_quantity: int | None
    created_at: datetime | None

    def is_picked(self) -> bool:
        """Return ``True`` when the line has been picked and may be inventoried."""

        return self.pick_status == PICK_STATUS_PICKED


__all__ = ["OrderLine", "PICK_STATUS_NOT_PICKED", "PICK_STATUS_PICKED"]
