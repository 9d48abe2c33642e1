"""Repository implementations for infrastructure layer."""

from .article_repository import ArticleRepository
from .inventory_count_repository import InventoryCountRepository
from .maintenance_repository import MaintenanceRepository
from .order_line_repository import OrderLineRepository
from .user_repository import UserRepository

__all__ = [
    "ArticleRepository",
    "InventoryCountRepository",
    "MaintenanceRepository",
    "OrderLineRepository",
    "UserRepository",
]
