"""Client-side cache invalidation driven by realtime change events."""

from .invalidation import (
    ARTICLES_KEY,
    CACHE_KEYS,
    INVENTORY_COUNTS_KEY,
    ORDER_LINES_KEY,
    USERS_KEY,
    cache_keys_for,
    cache_keys_for_cleared_data,
    cache_keys_for_event,
    cache_keys_for_message,
)
from .query_cache import QueryCache
from .subscriber import Backoff, ConnectionState, RealtimeSubscriber

__all__ = [
    "ARTICLES_KEY",
    "Backoff",
    "CACHE_KEYS",
    "ConnectionState",
    "INVENTORY_COUNTS_KEY",
    "ORDER_LINES_KEY",
    "QueryCache",
    "RealtimeSubscriber",
    "USERS_KEY",
    "cache_keys_for",
    "cache_keys_for_cleared_data",
    "cache_keys_for_event",
    "cache_keys_for_message",
]
