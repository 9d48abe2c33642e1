"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.sql import expression

from app.domain.entities import ROLE_USER
from app.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a warehouse user."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True)
    name = Column(String(100), nullable=False, index=True)
    role = Column(String(50), nullable=False, default=ROLE_USER)
    email = Column(String(120), nullable=True)
    password = Column(String(255), nullable=False, default="")
    is_active = Column(
        Boolean,
        nullable=False,
        default=True,
        server_default=expression.true(),
    )
    last_active = Column(DateTime(timezone=True), nullable=True)


__all__ = ["UserModel"]
