"""Administration panel schemas."""

from .base import CamelModel


class AdminPasswordRequest(CamelModel):
    password: str
