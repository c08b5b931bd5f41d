"""Merge the segment streams into one status line and publish it."""

from __future__ import annotations

import asyncio
from typing import AsyncIterable, AsyncIterator, Iterable

SEPARATOR = "|"
_DONE = object()


async def combine(sources: Iterable[AsyncIterable[bytes | str]]) -> AsyncIterator[str]:
    """Yield the joined segments each time any source produces a value."""
    sources = list(sources)
    chunks = [""] * len(sources)
    queue: asyncio.Queue = asyncio.Queue(maxsize=1)

    async def pump(index: int, source: AsyncIterable[bytes | str]) -> None:
        try:
            async for item in source:
                await queue.put((index, item))
        except Exception as exc:
            await queue.put((index, exc))
        else:
            await queue.put((index, _DONE))

    tasks = [asyncio.create_task(pump(i, s)) for i, s in enumerate(sources)]
    remaining = len(tasks)
    try:
        while remaining:
            index, value = await queue.get()
            if value is _DONE:
                remaining -= 1
                continue
            if isinstance(value, Exception):
                raise value
            if isinstance(value, bytes):
                value = value.decode("utf-8", errors="replace")
            chunks[index] = value
            yield SEPARATOR.join(chunks)
    finally:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)


async def run(bar, sources: Iterable[AsyncIterable[bytes | str]]) -> None:
    """Write every combined status line to ``bar``."""
    async for state in combine(sources):
        bar.update(state)