"""SQLAlchemy model for inventory counts."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class InventoryCountModel(Base):
    """Database representation of a count logged for an article."""

    __tablename__ = "inventory_counts"

    id = Column(String(36), primary_key=True)
    article_id = Column(
        String(36),
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    count = Column(Integer, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=True, default=now_in_app_timezone
    )
    article = relationship("ArticleModel", back_populates="inventory_counts")


__all__ = ["InventoryCountModel"]
