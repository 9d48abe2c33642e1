"""Use cases for order lines."""

from .create_order_line import create_order_line
from .import_order_lines import import_order_lines
from .inventory_order_line import ONLY_PICKED_MESSAGE, inventory_order_line
from .list_order_lines import list_order_lines

__all__ = [
    "ONLY_PICKED_MESSAGE",
    "create_order_line",
    "import_order_lines",
    "inventory_order_line",
    "list_order_lines",
]
