"""A clock segment that cycles between several faces when toggled."""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import AsyncIterator

from .models import Calendar, Clock, Day, Watchface, WeekNo

REFRESH = 5.0
SEND_TIMEOUT = 5.0

_MONTHS = "Jan Feb Mar Apr May Jun Jul Aug Sep Oct Nov Dec".split()
_WEEKDAYS = "Monday Tuesday Wednesday Thursday Friday Saturday Sunday".split()


class WatchTimeout(TimeoutError):
    """Raised when the watch does not accept a toggle in time."""


def render_face(face: Watchface, when: datetime) -> str:
    """Render ``when`` as the given watch face."""
    if face is Watchface.CLOCK:
        return str(Clock(f"{when.hour:02d}:{when.minute:02d}"))
    if face is Watchface.DATE:
        return str(Calendar(f"{when.day:02d} {_MONTHS[when.month - 1]} {when.year}"))
    if face is Watchface.WEEKNUMBER:
        return str(WeekNo(f"Week: {when.isocalendar()[1]}"))
    return str(Day(_WEEKDAYS[when.weekday()]))


class Watch:
    """Emits the current face every few seconds and on every toggle."""

    refresh = REFRESH
    send_timeout = SEND_TIMEOUT

    def __init__(self) -> None:
        self._toggles: asyncio.Queue = asyncio.Queue()

    async def toggle(self) -> None:
        """Advance to the next face."""
        ack = asyncio.get_running_loop().create_future()
        self._toggles.put_nowait(ack)
        try:
            await asyncio.wait_for(ack, self.send_timeout)
        except asyncio.TimeoutError:
            raise WatchTimeout("timeout while trying to toggle") from None

    async def _received_toggle(self) -> bool:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.refresh
        while True:
            try:
                if self._toggles.empty():
                    remaining = deadline - loop.time()
                    if remaining <= 0:
                        return False
                    ack = await asyncio.wait_for(self._toggles.get(), remaining)
                else:
                    ack = self._toggles.get_nowait()
            except asyncio.TimeoutError:
                return False
            if not ack.done():
                ack.set_result(None)
                return True

    async def updates(self) -> AsyncIterator[str]:
        """Yield the rendered face, starting with the clock."""
        face = Watchface.CLOCK
        yield render_face(face, datetime.now())
        while True:
            now = datetime.now()
            if await self._received_toggle():
                face = face.next()
            yield render_face(face, now)