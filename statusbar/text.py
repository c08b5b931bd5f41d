"""A scrolling text window fed one byte at a time."""

from __future__ import annotations

import asyncio
from typing import AsyncIterator

from .models import Text

DEFAULT_DELAY = 0.5
SEND_TIMEOUT = 5.0

_TOGGLE = object()
_TIMED_OUT = object()


class TextTimeout(TimeoutError):
    """Raised when the scroller does not accept input in time."""

    def __init__(self, message: str, written: int = 0) -> None:
        super().__init__(message)
        self.written = written


class TextScroller:
    """Scrolls written bytes through a fixed-width window."""

    send_timeout = SEND_TIMEOUT

    def __init__(self, window_width: int = 80, delay: float | None = None) -> None:
        if window_width < 1:
            raise ValueError("window width must be at least 1")
        self.window_width = window_width
        self.delay = delay or DEFAULT_DELAY
        self._events: asyncio.Queue = asyncio.Queue()

    async def _send(self, event: object) -> None:
        ack = asyncio.get_running_loop().create_future()
        self._events.put_nowait((event, ack))
        await asyncio.wait_for(ack, self.send_timeout)

    async def write(self, data: bytes | str) -> int:
        """Feed ``data`` into the window byte by byte; return the count."""
        if isinstance(data, str):
            data = data.encode()
        for written, byte in enumerate(data):
            try:
                await self._send(byte)
            except asyncio.TimeoutError:
                raise TextTimeout("timeout when writing stream", written) from None
        return len(data)

    async def toggle(self) -> None:
        """Switch the text between shown and hidden."""
        try:
            await self._send(_TOGGLE)
        except asyncio.TimeoutError:
            raise TextTimeout("timeout while toggling text") from None

    async def _receive(self) -> object:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.delay
        while True:
            remaining = deadline - loop.time()
            if self._events.empty() and remaining <= 0:
                return _TIMED_OUT
            try:
                event, ack = await asyncio.wait_for(self._events.get(), max(remaining, 0))
            except asyncio.TimeoutError:
                return _TIMED_OUT
            if not ack.done():  # the sender may have given up already
                ack.set_result(None)
                return event

    async def updates(self) -> AsyncIterator[str]:
        """Yield the rendered window after every step; empty while hidden."""
        window = bytearray(b" " * self.window_width)
        show = False
        while True:
            window[:-1] = window[1:]
            event = await self._receive()
            if event is _TOGGLE:
                show = not show
            elif event is _TIMED_OUT:
                window[-1] = ord(" ")
            else:
                window[-1] = event
                await asyncio.sleep(self.delay)
            yield str(Text(window.decode("utf-8", errors="replace"))) if show else ""