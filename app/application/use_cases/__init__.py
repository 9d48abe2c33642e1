"""Aggregate application use cases."""

from .admin import clear_all_data, verify_admin_password
from .articles import import_articles, record_article_count
from .order_lines import import_order_lines, inventory_order_line
from .users import login_user, seed_default_users

__all__ = [
    "clear_all_data",
    "import_articles",
    "import_order_lines",
    "inventory_order_line",
    "login_user",
    "record_article_count",
    "seed_default_users",
    "verify_admin_password",
]
