"""User schemas."""

from datetime import datetime

from pydantic import ConfigDict, EmailStr, Field

from app.domain.entities import ROLE_USER

from .base import CamelModel


class UserBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    role: str = ROLE_USER
    email: EmailStr | None = None


class UserCreate(UserBase):
    password: str | None = Field(default=None, min_length=6)
    is_active: bool = True


class UserUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    role: str | None = None
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=6)
    is_active: bool | None = None

    model_config = ConfigDict(extra="forbid")


class UserRead(CamelModel):
    id: str
    name: str
    role: str
    email: str | None
    is_active: bool
    last_active: datetime | None
