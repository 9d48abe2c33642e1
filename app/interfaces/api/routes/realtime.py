"""Websocket endpoint streaming change events to connected clients."""

import asyncio
import logging

from fastapi import APIRouter, Depends, WebSocket

from app.infrastructure.realtime import ChangeEventBroadcaster, WebSocketTransport
from app.interfaces.api.dependencies import get_websocket_broadcaster

router = APIRouter(tags=["realtime"])
logger = logging.getLogger(__name__)


@router.websocket("/ws")
async def change_events(
    websocket: WebSocket,
    broadcaster: ChangeEventBroadcaster = Depends(get_websocket_broadcaster),
) -> None:
    """Push ``{"type", "data"}`` frames for every committed change.

    Nothing is replayed on connect. Frames sent by the client are ignored.
    """

    await websocket.accept()
    session = broadcaster.open_session(WebSocketTransport(websocket))
    writer = asyncio.create_task(broadcaster.run_session(session))
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    finally:
        broadcaster.unregister(session)
        writer.cancel()
        try:
            await writer
        except asyncio.CancelledError:
            pass
