"""Tests for the realtime subscriber's connection loop."""

from contextlib import asynccontextmanager

import pytest

from app.client import (
    ARTICLES_KEY,
    INVENTORY_COUNTS_KEY,
    Backoff,
    ConnectionState,
    QueryCache,
    RealtimeSubscriber,
)


class ScriptedServer:
    """Connection factory playing back one outcome per connection attempt."""

    def __init__(self, outcomes, *, on_exhausted=None):
        self.outcomes = list(outcomes)
        self.on_exhausted = on_exhausted
        self.attempts = 0

    def connect(self):
        self.attempts += 1
        if not self.outcomes:
            if self.on_exhausted is not None:
                self.on_exhausted()
            raise ConnectionRefusedError("no more outcomes")
        outcome = self.outcomes.pop(0)
        return self._session(outcome)

    @asynccontextmanager
    async def _session(self, outcome):
        if isinstance(outcome, Exception):
            raise outcome

        async def frames():
            for frame in outcome:
                yield frame

        yield frames()


def _cache() -> QueryCache:
    cache = QueryCache()
    cache.register(ARTICLES_KEY, list)
    cache.register(INVENTORY_COUNTS_KEY, list)
    cache.get(ARTICLES_KEY)
    cache.get(INVENTORY_COUNTS_KEY)
    return cache


def test_backoff_doubles_up_to_the_cap():
    backoff = Backoff()
    delays = [backoff.next_delay() for _ in range(9)]

    assert delays == [0.5, 1.0, 2.0, 4.0, 8.0, 16.0, 30.0, 30.0, 30.0]
    backoff.reset()
    assert backoff.next_delay() == 0.5


def test_backoff_rejects_invalid_settings():
    with pytest.raises(ValueError):
        Backoff(initial=0)
    with pytest.raises(ValueError):
        Backoff(initial=5, maximum=1)


@pytest.mark.anyio
async def test_reconnects_with_backoff_and_invalidates_on_events():
    delays = []
    states = []
    cache = _cache()
    server = ScriptedServer(
        [
            ConnectionRefusedError("down"),
            OSError("still down"),
            ['{"type":"inventory_count_created","data":{"count":12}}'],
        ]
    )

    async def fake_sleep(delay):
        delays.append(delay)

    subscriber = RealtimeSubscriber(
        server.connect, cache, sleep=fake_sleep, on_state_change=states.append
    )
    server.on_exhausted = subscriber.stop

    await subscriber.run()

    assert delays == [0.5, 1.0, 0.5]
    assert server.attempts == 4
    assert states == [
        ConnectionState.CONNECTING,
        ConnectionState.DISCONNECTED,
        ConnectionState.CONNECTING,
        ConnectionState.DISCONNECTED,
        ConnectionState.CONNECTING,
        ConnectionState.CONNECTED,
        ConnectionState.DISCONNECTED,
        ConnectionState.CONNECTING,
        ConnectionState.DISCONNECTED,
    ]
    assert cache.is_stale(ARTICLES_KEY)
    assert cache.is_stale(INVENTORY_COUNTS_KEY)
    assert subscriber.state is ConnectionState.DISCONNECTED


@pytest.mark.anyio
async def test_stop_while_connected_does_not_reconnect():
    cache = _cache()
    delays = []
    subscriber = None

    class StopAfterFirstFrame(ScriptedServer):
        @asynccontextmanager
        async def _session(self, outcome):
            async def frames():
                for frame in outcome:
                    yield frame
                    subscriber.stop()

            yield frames()

    server = StopAfterFirstFrame([['{"type":"data_cleared"}', '{"type":"user_created"}']])

    async def fake_sleep(delay):
        delays.append(delay)

    subscriber = RealtimeSubscriber(server.connect, cache, sleep=fake_sleep)
    await subscriber.run()

    assert delays == []
    assert server.attempts == 1
    assert subscriber.stopped
    assert cache.is_stale(ARTICLES_KEY)


def test_handle_message_ignores_unknown_frames():
    cache = _cache()
    subscriber = RealtimeSubscriber(lambda: None, cache)

    assert subscriber.handle_message("garbage") == frozenset()
    assert not cache.is_stale(ARTICLES_KEY)
