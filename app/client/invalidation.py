"""Which cached queries a change event makes stale."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from app.domain.entities import (
    CLEARED_RESOURCES,
    ChangeEvent,
    ChangeKind,
    ResourceType,
    parse_event_type,
)

logger = logging.getLogger(__name__)

USERS_KEY = "/api/users"
ARTICLES_KEY = "/api/articles"
ORDER_LINES_KEY = "/api/order-lines"
INVENTORY_COUNTS_KEY = "/api/inventory-counts"

# Article lists show totals derived from counts, and replacing articles
# cascades their counts, hence the cross entries.
CACHE_KEYS: Mapping[ResourceType, frozenset[str]] = {
    ResourceType.USER: frozenset({USERS_KEY}),
    ResourceType.ARTICLE: frozenset({ARTICLES_KEY, INVENTORY_COUNTS_KEY}),
    ResourceType.ORDER_LINE: frozenset({ORDER_LINES_KEY}),
    ResourceType.INVENTORY_COUNT: frozenset({INVENTORY_COUNTS_KEY, ARTICLES_KEY}),
}


def cache_keys_for(resource_type: ResourceType) -> frozenset[str]:
    """Return the query keys to invalidate when ``resource_type`` changes."""

    return CACHE_KEYS[resource_type]


def cache_keys_for_cleared_data() -> frozenset[str]:
    keys: set[str] = set()
    for resource_type in CLEARED_RESOURCES:
        keys |= cache_keys_for(resource_type)
    return frozenset(keys)


def cache_keys_for_event(event: ChangeEvent) -> frozenset[str]:
    if event.kind is ChangeKind.DATA_CLEARED or event.resource_type is None:
        return cache_keys_for_cleared_data()
    return cache_keys_for(event.resource_type)


def cache_keys_for_message(message: str | bytes | Mapping[str, Any]) -> frozenset[str]:
    """Return the query keys to invalidate for one websocket frame.

    Frames that are not JSON objects or carry an unknown ``type`` invalidate
    nothing.
    """

    if isinstance(message, (str, bytes)):
        try:
            message = json.loads(message)
        except ValueError:
            logger.warning("Ignoring realtime frame that is not JSON")
            return frozenset()

    if not isinstance(message, Mapping):
        logger.warning("Ignoring realtime frame without a type")
        return frozenset()

    event_type = message.get("type")
    parsed = parse_event_type(event_type) if isinstance(event_type, str) else None
    if parsed is None:
        logger.warning("Ignoring unknown realtime event type %r", event_type)
        return frozenset()

    kind, resource_type = parsed
    if kind is ChangeKind.DATA_CLEARED or resource_type is None:
        return cache_keys_for_cleared_data()
    return cache_keys_for(resource_type)


__all__ = [
    "ARTICLES_KEY",
    "CACHE_KEYS",
    "INVENTORY_COUNTS_KEY",
    "ORDER_LINES_KEY",
    "USERS_KEY",
    "cache_keys_for",
    "cache_keys_for_cleared_data",
    "cache_keys_for_event",
    "cache_keys_for_message",
]
