"""Use cases for inventory counts."""

from .delete_inventory_count import delete_inventory_count
from .list_inventory_counts import list_inventory_counts
from .update_inventory_count import update_inventory_count

__all__ = [
    "delete_inventory_count",
    "list_inventory_counts",
    "update_inventory_count",
]
