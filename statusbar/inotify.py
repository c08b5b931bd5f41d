"""Watch a single file for modifications."""

from __future__ import annotations

import asyncio
import os
from typing import AsyncIterator

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer


class _ModifiedHandler(FileSystemEventHandler):
    def __init__(
        self, target: str, loop: asyncio.AbstractEventLoop, queue: asyncio.Queue
    ) -> None:
        super().__init__()
        self._target = target
        self._loop = loop
        self._queue = queue

    def on_modified(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        if os.path.abspath(os.fsdecode(event.src_path)) != self._target:
            return
        message = f"Name: {self._target}, Event: {event.event_type}"
        self._loop.call_soon_threadsafe(self._queue.put_nowait, message)


async def listen(path: os.PathLike | str) -> AsyncIterator[str]:
    """Yield a description each time the file at ``path`` is modified."""
    target = os.path.abspath(os.fspath(path))
    directory = os.path.dirname(target)
    if not os.path.isdir(directory):
        raise FileNotFoundError(f"no such directory: {directory}")
    queue: asyncio.Queue = asyncio.Queue()
    observer = Observer()
    observer.schedule(
        _ModifiedHandler(target, asyncio.get_running_loop(), queue),
        directory,
        recursive=False,
    )
    observer.start()
    try:
        while True:
            yield await queue.get()
    finally:
        observer.stop()
        await asyncio.to_thread(observer.join)