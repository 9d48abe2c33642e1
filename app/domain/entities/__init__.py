"""Domain entities exposed by the application."""

from .article import Article
from .change_event import (
    CLEARED_RESOURCES,
    DATA_CLEARED_EVENT_TYPE,
    INVENTORIED_ACTION,
    UPDATE_ACTIONS,
    ChangeEvent,
    ChangeKind,
    DeletedResource,
    ResourceType,
    parse_event_type,
)
from .inventory_count import InventoryCount
from .order_line import PICK_STATUS_NOT_PICKED, PICK_STATUS_PICKED, OrderLine
from .user import ROLE_ADMIN, ROLE_USER, User

__all__ = [
    "Article",
    "CLEARED_RESOURCES",
    "ChangeEvent",
    "ChangeKind",
    "DATA_CLEARED_EVENT_TYPE",
    "DeletedResource",
    "INVENTORIED_ACTION",
    "InventoryCount",
    "OrderLine",
    "PICK_STATUS_NOT_PICKED",
    "PICK_STATUS_PICKED",
    "ROLE_ADMIN",
    "ROLE_USER",
    "ResourceType",
    "UPDATE_ACTIONS",
    "User",
    "parse_event_type",
]
