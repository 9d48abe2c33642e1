"""Order line schemas."""

from datetime import datetime

from pydantic import Field

from app.domain.entities import PICK_STATUS_NOT_PICKED

from .base import CamelModel


class OrderLineCreate(CamelModel):
    order_number: str = Field(..., min_length=1)
    article_number: str = Field(..., min_length=1)
    description: str
    length: str
    position: str | None = None
    quantity: int = Field(..., ge=0)
    pick_status: str = PICK_STATUS_NOT_PICKED


class OrderLineRead(CamelModel):
    id: str
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


class OrderLineInventory(CamelModel):
    """Body of ``POST /api/order-lines/{id}/inventory``."""

    user_id: str = Field(..., min_length=1)
    inventoried_quantity: int | None = Field(default=None, ge=0)


class OrderLineImportResponse(CamelModel):
    count: int
    order_lines: list[OrderLineRead]
