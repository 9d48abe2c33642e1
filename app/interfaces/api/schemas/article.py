"""Article schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field

from .base import CamelModel


class ArticleCreate(CamelModel):
    article_number: str = Field(..., min_length=1)
    description: str
    length: str
    location: str
    inventory_count: int | None = Field(default=None, ge=0)
    notes: str | None = None


class ArticleUpdate(CamelModel):
    article_number: str | None = Field(default=None, min_length=1)
    description: str | None = None
    length: str | None = None
    location: str | None = None
    inventory_count: int | None = Field(default=None, ge=0)
    notes: str | None = None
    is_inventoried: bool | None = None
    last_inventoried_by: str | None = None

    model_config = ConfigDict(extra="forbid")


class ArticleRead(CamelModel):
    id: str
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


class ArticleCountCreate(CamelModel):
    """Body of ``POST /api/articles/{id}/inventory``."""

    inventory_count: int = Field(..., ge=0)
    notes: str | None = None
    user_id: str = Field(..., min_length=1)


class ArticleImportResponse(CamelModel):
    count: int
    articles: list[ArticleRead]
