"""Realtime change-event fan-out for connected clients."""

from .manager import ChangeEventBroadcaster
from .publisher import ChangeEventPublisher, EventPublisher
from .serialization import (
    build_message,
    serialize_change_event,
    serialize_record,
)
from .session import ClientSession, OverflowPolicy, Transport, WebSocketTransport

__all__ = [
    "ChangeEventBroadcaster",
    "ChangeEventPublisher",
    "ClientSession",
    "EventPublisher",
    "OverflowPolicy",
    "Transport",
    "WebSocketTransport",
    "build_message",
    "serialize_change_event",
    "serialize_record",
]
