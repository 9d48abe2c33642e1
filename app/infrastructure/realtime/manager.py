"""Registry of realtime sessions and change-event fan-out."""

from __future__ import annotations

import logging
import threading

from app.domain.entities import ChangeEvent

from .serialization import serialize_change_event
from .session import ClientSession, OverflowPolicy, Transport

logger = logging.getLogger(__name__)


class ChangeEventBroadcaster:
    """Push every :class:`ChangeEvent` to all registered client sessions.

    Delivery is best-effort and at-most-once: there is no acknowledgement,
    retry or replay. A session that fails or reports closed is removed so no
    later broadcast touches it. Handlers run in a thread pool, hence the lock
    around the registry.
    """

    def __init__(
        self,
        *,
        max_pending: int = 100,
        overflow_policy: OverflowPolicy | str = OverflowPolicy.DROP_OLDEST,
    ) -> None:
        self.max_pending = max_pending
        self.overflow_policy = OverflowPolicy(overflow_policy)
        self._sessions: set[ClientSession] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, session: object) -> bool:
        with self._lock:
            return session in self._sessions

    def sessions(self) -> list[ClientSession]:
        with self._lock:
            return list(self._sessions)

    def open_session(self, transport: Transport) -> ClientSession:
        """Create a session for ``transport`` with this registry's limits and register it."""

        session = ClientSession(
            transport,
            max_pending=self.max_pending,
            overflow_policy=self.overflow_policy,
        )
        self.register(session)
        return session

    def register(self, session: ClientSession) -> None:
        with self._lock:
            if session in self._sessions:
                return
            self._sessions.add(session)
            total = len(self._sessions)
        logger.info("Realtime client connected (%d active)", total)

    def unregister(self, session: ClientSession) -> None:
        with self._lock:
            if session not in self._sessions:
                return
            self._sessions.discard(session)
            total = len(self._sessions)
        session.close()
        logger.info("Realtime client disconnected (%d active)", total)

    def broadcast(self, event: ChangeEvent) -> int:
        """Queue ``event`` on every open session and return how many accepted it."""

        message = serialize_change_event(event)
        delivered = 0
        for session in self.sessions():
            if not session.is_open:
                self.unregister(session)
                continue
            if session.enqueue(message):
                delivered += 1
        logger.debug("Broadcast %s to %d session(s)", event.event_type, delivered)
        return delivered

    async def run_session(self, session: ClientSession) -> None:
        """Drive the writer loop of ``session`` until it closes or fails."""

        try:
            await session.pump()
        except Exception as exc:
            logger.warning(
                "Dropping realtime client connected at %s after write failure: %s",
                session.connected_at.isoformat(),
                exc,
            )
            self.unregister(session)

    async def flush(self, session: ClientSession) -> int:
        """Write what is queued for ``session`` now, unregistering it on failure.

        Served connections are drained by :meth:`run_session`; this one-shot
        drain is for callers without a writer task, such as unit tests.
        """

        try:
            return await session.deliver_pending()
        except Exception as exc:
            logger.warning(
                "Dropping realtime client connected at %s after write failure: %s",
                session.connected_at.isoformat(),
                exc,
            )
            self.unregister(session)
            return 0

    def close_all(self) -> None:
        """Unregister every session, used when the application shuts down."""

        for session in self.sessions():
            self.unregister(session)


__all__ = ["ChangeEventBroadcaster"]
