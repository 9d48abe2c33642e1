"""Inventory count schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field

from .base import CamelModel


class InventoryCountRead(CamelModel):
    id: str
    article_id: str
    user_id: str
    count: int
    notes: str | None
    created_at: datetime | None


class InventoryCountUpdate(CamelModel):
    count: int | None = Field(default=None, ge=0)
    notes: str | None = None

    model_config = ConfigDict(extra="forbid")
