"""Use cases for managing users."""

from .authenticate_user import authenticate_user, login_user
from .create_user import create_user
from .delete_user import delete_user
from .list_users import list_users
from .record_activity import record_activity
from .seed_default_users import DEFAULT_USERS, seed_default_users
from .update_user import update_user

__all__ = [
    "DEFAULT_USERS",
    "authenticate_user",
    "create_user",
    "delete_user",
    "list_users",
    "login_user",
    "record_activity",
    "seed_default_users",
    "update_user",
]
