from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Awaitable, Callable

logger = logging.getLogger("todo_clock.clock")

OPEN = "open"
CLOSED = "closed"


def format_clock(moment: datetime) -> str:
    return moment.strftime("%H:%M:%S")


class ClockStreamer:
    """
    Sends the local wall-clock time as ``HH:MM:SS`` once per interval.

    The streamer owns its connection for its whole life. The first failed
    send closes it; nothing is retried and the failure is not reported
    upwards. Cancelling the surrounding task also stops it.
    """

    def __init__(
        self,
        send: Callable[[str], Awaitable[None]],
        interval: float = 1.0,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._send = send
        self.interval = interval
        self._clock = clock
        self.state = OPEN
        self.frames_sent = 0

    async def run(self) -> int:
        while self.state == OPEN:
            await asyncio.sleep(self.interval)
            frame = format_clock(self._clock())
            try:
                await self._send(frame)
            except Exception as e:
                self.state = CLOSED
                logger.info(
                    "clock.closed",
                    extra={
                        "category": "clock",
                        "event": "clock.closed",
                        "frames_sent": self.frames_sent,
                        "reason": type(e).__name__,
                    },
                )
                break
            self.frames_sent += 1
        return self.frames_sent
