"""HTTP control interface for the clock and the scrolling text."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from aiohttp import WSMsgType, web

log = logging.getLogger(__name__)

DEFAULT_PORT = 4545


class _Toggle(Protocol):
    async def toggle(self) -> None: ...


class _Text(_Toggle, Protocol):
    async def write(self, data: bytes) -> int: ...


def _error(exc: BaseException) -> web.Response:
    return web.Response(status=500, text=f"{exc}\n")


class Api:
    """Routes that toggle the clock face, toggle and feed the text."""

    def __init__(self, watch: _Toggle, text: _Text) -> None:
        self._watch = watch
        self._text = text

    async def _toggle_time(self, request: web.Request) -> web.Response:
        try:
            await self._watch.toggle()
        except Exception as exc:
            return _error(exc)
        return web.Response()

    async def _toggle_text(self, request: web.Request) -> web.Response:
        try:
            await self._text.toggle()
        except Exception as exc:
            return _error(exc)
        return web.Response()

    async def _stream(self, request: web.Request) -> web.StreamResponse:
        ws = web.WebSocketResponse()
        if not ws.can_prepare(request).ok:
            log.warning("websocket upgrade failed")
            return web.Response(status=500, text="websocket upgrade failed\n")
        await ws.prepare(request)
        async for message in ws:
            if message.type == WSMsgType.BINARY:
                data = message.data
            elif message.type == WSMsgType.TEXT:
                data = message.data.encode("utf-8")
            else:
                continue
            try:
                await self._text.write(data)
            except Exception as exc:
                log.warning("%s", exc)
                break
        await ws.close()
        return ws

    def app(self) -> web.Application:
        """Build the web application serving the control routes."""
        application = web.Application()
        application.add_routes(
            [
                web.route("*", "/time", self._toggle_time),
                web.route("*", "/stream", self._stream),
                web.route("*", "/text", self._toggle_text),
            ]
        )
        return application

    async def run(self, host: str | None = None, port: int = DEFAULT_PORT) -> None:
        """Serve the control routes until cancelled."""
        runner = web.AppRunner(self.app())
        await runner.setup()
        try:
            site = web.TCPSite(runner, host, port)
            await site.start()
            log.info("Listen and serving api")
            await asyncio.Event().wait()
        finally:
            await runner.cleanup()