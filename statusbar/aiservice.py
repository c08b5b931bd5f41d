"""Web service that answers questions and feeds the answer to the text stream."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import AsyncIterator

import aiohttp
from aiohttp import web

log = logging.getLogger(__name__)

DEFAULT_MODEL = "mistral"
DEFAULT_PORT = 4343
OLLAMA_URL = "http://localhost:11434"
STREAM_URL = "ws://localhost:4545/stream"


class AiServiceError(Exception):
    """Raised when the model cannot be queried or its answer not forwarded."""


class AiService:
    """Answers questions posted to ``/ask`` by streaming them to the bar."""

    def __init__(self, model: str = DEFAULT_MODEL, ollama_url: str = OLLAMA_URL,
                 stream_url: str = STREAM_URL) -> None:
        self.model = model
        self.ollama_url = ollama_url.rstrip("/")
        self.stream_url = stream_url

    async def _generate(self, session: aiohttp.ClientSession, prompt: str) -> AsyncIterator[bytes]:
        payload = {"model": self.model, "prompt": prompt, "stream": True}
        async with session.post(f"{self.ollama_url}/api/generate", json=payload) as response:
            if response.status != 200:
                body = (await response.text()).strip()
                raise AiServiceError(f"model returned {response.status}: {body}")
            async for line in response.content:
                if not line.strip():
                    continue
                message = json.loads(line)
                if "error" in message:
                    raise AiServiceError(str(message["error"]))
                if message.get("response"):
                    yield message["response"].encode("utf-8")
                if message.get("done"):
                    break

    async def _ask(self, request: web.Request) -> web.Response:
        question = (await request.post()).get("question") or request.query.get("question")
        if not isinstance(question, str) or not question:
            return web.Response(status=406, text="missing question\n")
        try:
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=None)) as session:
                async with session.ws_connect(self.stream_url) as ws:
                    async for chunk in self._generate(session, question):
                        try:
                            await ws.send_bytes(chunk)
                        except (ConnectionError, aiohttp.ClientError) as exc:
                            raise AiServiceError(f"write to stream failed: {exc}") from exc
        except (AiServiceError, aiohttp.ClientError, OSError, ValueError) as exc:
            return web.Response(status=500, text=f"{exc}\n")
        return web.Response()

    def app(self) -> web.Application:
        """Build the web application serving ``/ask``."""
        application = web.Application()
        application.add_routes([web.route("*", "/ask", self._ask)])
        return application

    async def listen_and_serve(self, port: int = DEFAULT_PORT) -> None:
        """Serve until cancelled."""
        runner = web.AppRunner(self.app())
        await runner.setup()
        try:
            await web.TCPSite(runner, None, port).start()
            await asyncio.Event().wait()
        finally:
            await runner.cleanup()


def main(argv: list[str] | None = None) -> int:
    """Start the question service."""
    parser = argparse.ArgumentParser(prog="aiserver")
    parser.add_argument("--model", default=DEFAULT_MODEL)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--ollama-url", default=OLLAMA_URL)
    parser.add_argument("--stream-url", default=STREAM_URL)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    try:
        asyncio.run(AiService(args.model, args.ollama_url, args.stream_url).listen_and_serve(args.port))
    except OSError as exc:
        print(f"aiserver: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0