"""Hand change events from request handlers to the broadcaster."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from anyio import from_thread

from app.domain.entities import ChangeEvent

from .manager import ChangeEventBroadcaster

logger = logging.getLogger(__name__)


class EventPublisher(Protocol):
    """What mutation handlers depend on."""

    def publish(self, event: ChangeEvent) -> None: ...


class ChangeEventPublisher:
    """Schedule :class:`ChangeEvent` delivery without failing the caller.

    Synchronous route handlers run in anyio worker threads; the broadcast is
    moved onto the event loop there so registry access stays on one thread.
    Outside a worker thread (scripts, plain unit tests) the broadcaster is
    called directly, which its lock makes safe.
    """

    def __init__(self, broadcaster: ChangeEventBroadcaster) -> None:
        self._broadcaster = broadcaster

    @property
    def broadcaster(self) -> ChangeEventBroadcaster:
        return self._broadcaster

    def publish(self, event: ChangeEvent) -> None:
        try:
            self._dispatch(event)
        except Exception:
            logger.exception("Failed to broadcast %s", event.event_type)

    def _dispatch(self, event: ChangeEvent) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            self._broadcaster.broadcast(event)
            return

        hopped = False

        def _broadcast_on_loop() -> None:
            nonlocal hopped
            hopped = True
            self._broadcaster.broadcast(event)

        try:
            from_thread.run_sync(_broadcast_on_loop)
        except RuntimeError:
            if hopped:
                raise
            # Not an anyio worker thread: no loop to hop onto.
            self._broadcaster.broadcast(event)


__all__ = ["ChangeEventPublisher", "EventPublisher"]
