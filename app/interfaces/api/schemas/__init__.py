from .admin import AdminPasswordRequest
from .article import (
    ArticleCountCreate,
    ArticleCreate,
    ArticleImportResponse,
    ArticleRead,
    ArticleUpdate,
)
from .auth import LoginRequest, Token
from .base import CamelModel, SuccessResponse
from .inventory_count import InventoryCountRead, InventoryCountUpdate
from .order_line import (
    OrderLineCreate,
    OrderLineImportResponse,
    OrderLineInventory,
    OrderLineRead,
)
from .user import UserCreate, UserRead, UserUpdate

__all__ = [
    "AdminPasswordRequest",
    "ArticleCountCreate",
    "ArticleCreate",
    "ArticleImportResponse",
    "ArticleRead",
    "ArticleUpdate",
    "CamelModel",
    "InventoryCountRead",
    "InventoryCountUpdate",
    "LoginRequest",
    "OrderLineCreate",
    "OrderLineImportResponse",
    "OrderLineInventory",
    "OrderLineRead",
    "SuccessResponse",
    "Token",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
