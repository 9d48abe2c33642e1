"""SQLAlchemy model for order lines."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import expression

from app.domain.entities import PICK_STATUS_NOT_PICKED
from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class OrderLineModel(Base):
    """Database representation of one line of a picking order."""

    __tablename__ = "order_lines"

    id = Column(String(36), primary_key=True)
    order_number = Column(String(100), nullable=False, index=True)
    article_number = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    length = Column(String(50), nullable=False)
    position = Column(String(50), nullable=True)
    quantity = Column(Integer, nullable=False)
    pick_status = Column(String(50), nullable=False, default=PICK_STATUS_NOT_PICKED)
    is_inventoried = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    inventoried_by = Column(String(36), ForeignKey("users.id"), nullable=True)
    inventoried_at = Column(DateTime(timezone=True), nullable=True)
    inventoried_quantity = Column(Integer, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=True, default=now_in_app_timezone
    )


__all__ = ["OrderLineModel"]
