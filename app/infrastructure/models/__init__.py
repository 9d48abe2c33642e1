"""ORM models used by the application infrastructure."""

from .article import ArticleModel
from .inventory_count import InventoryCountModel
from .order_line import OrderLineModel
from .user import UserModel

__all__ = [
    "ArticleModel",
    "InventoryCountModel",
    "OrderLineModel",
    "UserModel",
]
