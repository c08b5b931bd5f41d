import pytest
from aiohttp import WSMsgType
from aiohttp.test_utils import TestClient, TestServer

from statusbar.api import Api
from statusbar.clock import WatchTimeout
from statusbar.text import TextTimeout


class _FakeWatch:
    def __init__(self, fail=False):
        self.toggles = 0
        self.fail = fail

    async def toggle(self):
        if self.fail:
            raise WatchTimeout("timeout while trying to toggle")
        self.toggles += 1


class _FakeText:
    def __init__(self, fail=False):
        self.toggles = 0
        self.written = []
        self.fail = fail

    async def toggle(self):
        if self.fail:
            raise TextTimeout("timeout while toggling text")
        self.toggles += 1

    async def write(self, data):
        if self.fail:
            raise TextTimeout("timeout when writing stream")
        self.written.append(data)
        return len(data)


@pytest.mark.asyncio
async def test_time_route_toggles_watch():
    watch = _FakeWatch()
    async with TestClient(TestServer(Api(watch, _FakeText()).app())) as client:
        response = await client.get("/time")
        assert response.status == 200
    assert watch.toggles == 1


@pytest.mark.asyncio
async def test_time_route_reports_timeout():
    async with TestClient(TestServer(Api(_FakeWatch(fail=True), _FakeText()).app())) as client:
        response = await client.post("/time")
        assert response.status == 500
        assert "timeout while trying to toggle" in await response.text()


@pytest.mark.asyncio
async def test_text_route_toggles_text():
    text = _FakeText()
    async with TestClient(TestServer(Api(_FakeWatch(), text).app())) as client:
        response = await client.get("/text")
        assert response.status == 200
    assert text.toggles == 1


@pytest.mark.asyncio
async def test_text_route_reports_timeout():
    async with TestClient(TestServer(Api(_FakeWatch(), _FakeText(fail=True)).app())) as client:
        response = await client.get("/text")
        assert response.status == 500
        assert "timeout while toggling text" in await response.text()


@pytest.mark.asyncio
async def test_stream_feeds_text():
    text = _FakeText()
    async with TestClient(TestServer(Api(_FakeWatch(), text).app())) as client:
        ws = await client.ws_connect("/stream")
        await ws.send_bytes(b"hello")
        await ws.send_str("world")
        await ws.close()
    assert text.written == [b"hello", b"world"]


@pytest.mark.asyncio
async def test_stream_closes_on_write_error():
    async with TestClient(TestServer(Api(_FakeWatch(), _FakeText(fail=True)).app())) as client:
        ws = await client.ws_connect("/stream")
        await ws.send_bytes(b"x")
        message = await ws.receive()
        assert message.type in (WSMsgType.CLOSE, WSMsgType.CLOSED, WSMsgType.CLOSING)


@pytest.mark.asyncio
async def test_stream_without_upgrade_fails():
    async with TestClient(TestServer(Api(_FakeWatch(), _FakeText()).app())) as client:
        response = await client.get("/stream")
        assert response.status == 500