"""Authentication related schemas."""

from pydantic import Field

from .base import CamelModel
from .user import UserRead


class LoginRequest(CamelModel):
    name: str = Field(..., min_length=1)
    password: str


class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead
