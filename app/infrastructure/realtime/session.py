"""One realtime client connection and its outbound queue."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections import deque
from datetime import datetime
from enum import Enum
from typing import Protocol

from fastapi import WebSocket
from starlette.websockets import WebSocketState

from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Write side of a realtime connection."""

    @property
    def is_open(self) -> bool: ...

    async def send_text(self, message: str) -> None: ...


class WebSocketTransport:
    """Adapt a FastAPI :class:`WebSocket` to :class:`Transport`."""

    def __init__(self, websocket: WebSocket) -> None:
        self.websocket = websocket

    @property
    def is_open(self) -> bool:
        return (
            self.websocket.client_state == WebSocketState.CONNECTED
            and self.websocket.application_state == WebSocketState.CONNECTED
        )

    async def send_text(self, message: str) -> None:
        await self.websocket.send_text(message)


class OverflowPolicy(str, Enum):
    """What to discard when a session's queue is full."""

    DROP_OLDEST = "drop_oldest"
    DROP_NEWEST = "drop_newest"


class ClientSession:
    """A registered connection with a bounded FIFO of serialized events.

    ``enqueue`` may be called from any thread; it never blocks on the network.
    Messages are written by :meth:`deliver_pending`, normally driven by the
    single writer loop in :meth:`pump`, so each session sees its messages in
    the order they were enqueued.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        max_pending: int = 100,
        overflow_policy: OverflowPolicy = OverflowPolicy.DROP_OLDEST,
    ) -> None:
        if max_pending < 1:
            raise ValueError("max_pending must be at least 1")
        self.transport = transport
        self.connected_at: datetime = now_in_app_timezone()
        self.max_pending = max_pending
        self.overflow_policy = OverflowPolicy(overflow_policy)
        self.dropped = 0
        self._pending: deque[str] = deque()
        self._lock = threading.Lock()
        self._closed = False
        self._loop: asyncio.AbstractEventLoop | None = None
        self._wakeup: asyncio.Event | None = None

    def __repr__(self) -> str:
        return f"<ClientSession connected_at={self.connected_at.isoformat()}>"

    @property
    def is_open(self) -> bool:
        return not self._closed and self.transport.is_open

    @property
    def closed(self) -> bool:
        return self._closed

    def pending(self) -> list[str]:
        """Return a snapshot of the messages not yet written."""

        with self._lock:
            return list(self._pending)

    def enqueue(self, message: str) -> bool:
        """Queue ``message`` for delivery; return ``False`` if it was discarded."""

        with self._lock:
            if self._closed:
                return False
            if len(self._pending) >= self.max_pending:
                self.dropped += 1
                if self.overflow_policy is OverflowPolicy.DROP_NEWEST:
                    logger.debug("Queue full for %r, dropping newest message", self)
                    return False
                self._pending.popleft()
                logger.debug("Queue full for %r, dropping oldest message", self)
            self._pending.append(message)
        self._signal()
        return True

    async def deliver_pending(self) -> int:
        """Write every queued message in order and return how many were sent.

        Transport errors propagate to the caller; the failed message is lost.
        """

        delivered = 0
        while True:
            with self._lock:
                if self._closed or not self._pending:
                    return delivered
                message = self._pending.popleft()
            await self.transport.send_text(message)
            delivered += 1

    async def pump(self) -> None:
        """Deliver messages as they arrive until the session is closed."""

        self._loop = asyncio.get_running_loop()
        self._wakeup = asyncio.Event()
        while not self._closed:
            self._wakeup.clear()
            await self.deliver_pending()
            with self._lock:
                idle = not self._pending
            if idle and not self._closed:
                await self._wakeup.wait()

    def close(self) -> None:
        """Stop accepting messages and discard what is still queued."""

        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._pending.clear()
        self._signal()

    def _signal(self) -> None:
        loop, wakeup = self._loop, self._wakeup
        if loop is None or wakeup is None or loop.is_closed():
            return
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is loop:
            wakeup.set()
        else:
            loop.call_soon_threadsafe(wakeup.set)


__all__ = ["ClientSession", "OverflowPolicy", "Transport", "WebSocketTransport"]
