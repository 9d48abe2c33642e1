"""SQLAlchemy model for catalogued articles."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class ArticleModel(Base):
    """Database representation of an article and its latest inventory state."""

    __tablename__ = "articles"

    id = Column(String(36), primary_key=True)
    article_number = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=False)
    length = Column(String(50), nullable=False)
    location = Column(String(100), nullable=False)
    inventory_count = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)
    is_inventoried = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    last_inventoried_by = Column(String(36), ForeignKey("users.id"), nullable=True)
    last_inventoried_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=True, default=now_in_app_timezone
    )
    inventory_counts = relationship(
        "InventoryCountModel",
        back_populates="article",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["ArticleModel"]
