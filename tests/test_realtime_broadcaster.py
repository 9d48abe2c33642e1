"""Tests for the change-event broadcaster and its client sessions."""

import asyncio
import json

import pytest

from app.domain.entities import ChangeEvent, ResourceType
from app.infrastructure.realtime import (
    ChangeEventBroadcaster,
    ClientSession,
    OverflowPolicy,
    serialize_change_event,
)


def _event(record_id: str) -> ChangeEvent:
    return ChangeEvent.deleted(ResourceType.USER, record_id)


def _ids(messages) -> list[str]:
    return [json.loads(message)["data"]["id"] for message in messages]


@pytest.mark.anyio
async def test_each_session_receives_broadcasts_in_order(fake_transport):
    broadcaster = ChangeEventBroadcaster()
    transport = fake_transport()
    session = broadcaster.open_session(transport)

    for record_id in ("a", "b", "c"):
        assert broadcaster.broadcast(_event(record_id)) == 1

    assert await broadcaster.flush(session) == 3
    assert _ids(transport.sent) == ["a", "b", "c"]


def test_broadcast_serializes_once_for_all_sessions(fake_transport):
    broadcaster = ChangeEventBroadcaster()
    first = broadcaster.open_session(fake_transport())
    second = broadcaster.open_session(fake_transport())

    event = _event("a")
    assert broadcaster.broadcast(event) == 2
    assert first.pending() == second.pending() == [serialize_change_event(event)]


def test_register_is_idempotent(fake_transport):
    broadcaster = ChangeEventBroadcaster()
    session = ClientSession(fake_transport())

    broadcaster.register(session)
    broadcaster.register(session)

    assert len(broadcaster) == 1
    assert broadcaster.broadcast(_event("a")) == 1
    assert len(session.pending()) == 1


def test_unregistered_session_receives_nothing(fake_transport):
    broadcaster = ChangeEventBroadcaster()
    session = broadcaster.open_session(fake_transport())

    broadcaster.unregister(session)
    broadcaster.unregister(session)
    broadcaster.unregister(ClientSession(fake_transport()))

    assert broadcaster.broadcast(_event("a")) == 0
    assert session.pending() == []
    assert session.closed


def test_closed_transport_is_skipped_and_removed(fake_transport):
    broadcaster = ChangeEventBroadcaster()
    closed_transport = fake_transport()
    closed = broadcaster.open_session(closed_transport)
    live = broadcaster.open_session(fake_transport())
    closed_transport.open = False

    assert broadcaster.broadcast(_event("a")) == 1
    assert closed not in broadcaster
    assert live in broadcaster
    assert closed.pending() == []


@pytest.mark.anyio
async def test_failed_write_removes_only_the_failing_session(fake_transport, caplog):
    broadcaster = ChangeEventBroadcaster()
    broken_transport = fake_transport(fail_with=ConnectionResetError("gone"))
    healthy_transport = fake_transport()
    broken = broadcaster.open_session(broken_transport)
    healthy = broadcaster.open_session(healthy_transport)

    broadcaster.broadcast(_event("a"))

    assert await broadcaster.flush(broken) == 0
    assert await broadcaster.flush(healthy) == 1
    assert broken not in broadcaster
    assert "write failure" in caplog.text

    assert broadcaster.broadcast(_event("b")) == 1
    await broadcaster.flush(healthy)
    assert _ids(healthy_transport.sent) == ["a", "b"]
    assert broken.pending() == []


def test_overflow_drops_oldest_by_default(fake_transport):
    broadcaster = ChangeEventBroadcaster(max_pending=2)
    session = broadcaster.open_session(fake_transport())

    for record_id in ("a", "b", "c"):
        broadcaster.broadcast(_event(record_id))

    assert _ids(session.pending()) == ["b", "c"]
    assert session.dropped == 1


def test_overflow_can_drop_newest(fake_transport):
    broadcaster = ChangeEventBroadcaster(
        max_pending=2, overflow_policy=OverflowPolicy.DROP_NEWEST
    )
    session = broadcaster.open_session(fake_transport())

    results = [broadcaster.broadcast(_event(record_id)) for record_id in ("a", "b", "c")]

    assert results == [1, 1, 0]
    assert _ids(session.pending()) == ["a", "b"]
    assert session.dropped == 1


def test_queue_bound_must_be_positive(fake_transport):
    with pytest.raises(ValueError):
        ClientSession(fake_transport(), max_pending=0)


@pytest.mark.anyio
async def test_run_session_writes_until_unregistered(fake_transport):
    broadcaster = ChangeEventBroadcaster()
    transport = fake_transport()
    session = broadcaster.open_session(transport)
    writer = asyncio.create_task(broadcaster.run_session(session))

    await asyncio.sleep(0)
    broadcaster.broadcast(_event("a"))
    broadcaster.broadcast(_event("b"))
    for _ in range(10):
        if len(transport.sent) == 2:
            break
        await asyncio.sleep(0)

    assert _ids(transport.sent) == ["a", "b"]

    broadcaster.unregister(session)
    await asyncio.wait_for(writer, timeout=1)
    assert writer.done()


@pytest.mark.anyio
async def test_run_session_unregisters_on_write_failure(fake_transport):
    broadcaster = ChangeEventBroadcaster()
    session = broadcaster.open_session(fake_transport(fail_with=RuntimeError("closed")))
    writer = asyncio.create_task(broadcaster.run_session(session))

    await asyncio.sleep(0)
    broadcaster.broadcast(_event("a"))
    await asyncio.wait_for(writer, timeout=1)

    assert session not in broadcaster
    assert len(broadcaster) == 0


@pytest.mark.anyio
async def test_broadcast_from_another_thread_wakes_the_writer(fake_transport):
    broadcaster = ChangeEventBroadcaster()
    transport = fake_transport()
    session = broadcaster.open_session(transport)
    writer = asyncio.create_task(broadcaster.run_session(session))
    await asyncio.sleep(0)

    await asyncio.to_thread(broadcaster.broadcast, _event("a"))
    for _ in range(50):
        if transport.sent:
            break
        await asyncio.sleep(0.01)

    assert _ids(transport.sent) == ["a"]
    broadcaster.close_all()
    await asyncio.wait_for(writer, timeout=1)
