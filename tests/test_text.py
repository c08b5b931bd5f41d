import asyncio

import pytest

from statusbar.models import Text
from statusbar.text import TextScroller, TextTimeout


async def _collect_until(updates, predicate, limit=500):
    seen = []
    async for item in updates:
        seen.append(item)
        if predicate(item) or len(seen) >= limit:
            break
    return seen


def test_rejects_empty_window():
    with pytest.raises(ValueError):
        TextScroller(0, 0.1)


def test_zero_delay_uses_default():
    assert TextScroller(10, 0).delay == 0.5


@pytest.mark.asyncio
async def test_hidden_by_default():
    scroller = TextScroller(2, 0.001)
    updates = scroller.updates()
    first = await anext(updates)
    await updates.aclose()
    assert first == ""


@pytest.mark.asyncio
async def test_toggle_shows_blank_window():
    scroller = TextScroller(3, 0.01)
    updates = scroller.updates()
    toggling = asyncio.create_task(scroller.toggle())
    seen = await asyncio.wait_for(_collect_until(updates, bool), 5)
    await toggling
    await updates.aclose()
    assert seen[-1] == str(Text("   "))


@pytest.mark.asyncio
async def test_written_bytes_scroll_in():
    scroller = TextScroller(3, 0.005)
    updates = scroller.updates()
    target = str(Text(" ab"))
    toggling = asyncio.create_task(scroller.toggle())
    writing = asyncio.create_task(scroller.write("ab"))
    seen = await asyncio.wait_for(_collect_until(updates, lambda o: o == target), 5)
    await toggling
    written = await writing
    await updates.aclose()
    assert seen[-1] == target
    assert str(Text("  a")) in seen
    assert written == 2


@pytest.mark.asyncio
async def test_text_scrolls_out_after_input_stops():
    scroller = TextScroller(2, 0.002)
    updates = scroller.updates()
    toggling = asyncio.create_task(scroller.toggle())
    writing = asyncio.create_task(scroller.write(b"z"))
    seen = await asyncio.wait_for(
        _collect_until(updates, lambda o: o == str(Text(" z"))), 5
    )
    later = [await anext(updates) for _ in range(2)]
    await toggling
    await writing
    await updates.aclose()
    assert seen[-1] == str(Text(" z"))
    assert later == [str(Text("z ")), str(Text("  "))]


@pytest.mark.asyncio
async def test_write_times_out_without_reader():
    scroller = TextScroller(4, 0.01)
    scroller.send_timeout = 0.01
    with pytest.raises(TextTimeout) as info:
        await scroller.write(b"xy")
    assert info.value.written == 0


@pytest.mark.asyncio
async def test_toggle_times_out_without_reader():
    scroller = TextScroller(4, 0.01)
    scroller.send_timeout = 0.01
    with pytest.raises(TextTimeout, match="timeout while toggling text"):
        await scroller.toggle()