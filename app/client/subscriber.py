"""Keep a :class:`QueryCache` in step with the server's change events."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterable, Awaitable, Callable
from contextlib import AbstractAsyncContextManager
from enum import Enum

from .invalidation import cache_keys_for_message
from .query_cache import QueryCache

logger = logging.getLogger(__name__)

Connect = Callable[[], AbstractAsyncContextManager[AsyncIterable[str]]]
Sleep = Callable[[float], Awaitable[None]]


class ConnectionState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class Backoff:
    """Exponential reconnect delays: ``initial * factor**n`` capped at ``maximum``."""

    def __init__(self, initial: float = 0.5, factor: float = 2.0, maximum: float = 30.0) -> None:
        if initial <= 0 or factor < 1 or maximum < initial:
            raise ValueError("Invalid backoff configuration")
        self.initial = initial
        self.factor = factor
        self.maximum = maximum
        self._attempts = 0

    def next_delay(self) -> float:
        delay = min(self.initial * self.factor**self._attempts, self.maximum)
        self._attempts += 1
        return delay

    def reset(self) -> None:
        self._attempts = 0


class RealtimeSubscriber:
    """Listen on the realtime channel and invalidate cached queries.

    ``connect`` returns an async context manager yielding the incoming text
    frames. Nothing is requested from the server on connect: the cache was
    filled by regular fetches and only needs invalidation hints from now on.
    Events missed while disconnected are not replayed.
    """

    def __init__(
        self,
        connect: Connect,
        cache: QueryCache,
        *,
        backoff: Backoff | None = None,
        sleep: Sleep = asyncio.sleep,
        on_state_change: Callable[[ConnectionState], None] | None = None,
    ) -> None:
        self._connect = connect
        self.cache = cache
        self.backoff = backoff or Backoff()
        self._sleep = sleep
        self._on_state_change = on_state_change
        self._state = ConnectionState.DISCONNECTED
        self._stopped = False

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self) -> None:
        """Finish the current frame, then leave :meth:`run` without reconnecting."""

        self._stopped = True

    async def run(self) -> None:
        while not self._stopped:
            await self._listen_once()
            if self._stopped:
                break
            delay = self.backoff.next_delay()
            logger.info("Realtime connection lost, reconnecting in %.1fs", delay)
            await self._sleep(delay)

    async def _listen_once(self) -> None:
        self._set_state(ConnectionState.CONNECTING)
        try:
            async with self._connect() as frames:
                self._set_state(ConnectionState.CONNECTED)
                self.backoff.reset()
                async for frame in frames:
                    self.handle_message(frame)
                    if self._stopped:
                        break
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            logger.warning("Realtime connection failed: %s", exc)
        finally:
            self._set_state(ConnectionState.DISCONNECTED)

    def handle_message(self, frame: str | bytes) -> frozenset[str]:
        """Invalidate the queries affected by ``frame`` and return their keys."""

        return self.cache.invalidate(cache_keys_for_message(frame))

    def _set_state(self, state: ConnectionState) -> None:
        if state is self._state:
            return
        self._state = state
        logger.debug("Realtime connection %s", state.value)
        if self._on_state_change is not None:
            self._on_state_change(state)


__all__ = ["Backoff", "ConnectionState", "RealtimeSubscriber"]
