from __future__ import annotations

import logging

from fastapi import APIRouter, WebSocket

from todo_clock.services.clock_streamer import ClockStreamer

router = APIRouter(tags=["clock"])
logger = logging.getLogger("todo_clock.clock")


@router.websocket("/ws")
async def ws_clock(websocket: WebSocket):
    await websocket.accept()
    client = websocket.client.host if websocket.client else None
    logger.info("clock.open", extra={"category": "clock", "event": "clock.open", "client": client})

    streamer = ClockStreamer(websocket.send_text, interval=websocket.app.state.settings.clock_interval)
    # returns once a send fails; the socket is already gone by then
    await streamer.run()
