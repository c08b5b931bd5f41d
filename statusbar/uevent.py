"""Kernel uevent listener reporting whether mains power is connected."""

from __future__ import annotations

import asyncio
import logging
import os
import socket
from typing import AsyncIterator, Iterable

log = logging.getLogger(__name__)

NETLINK_KOBJECT_UEVENT = 15


def parse_field(record: bytes | str) -> tuple[str, str] | None:
    """Split a ``KEY=VALUE`` record; return None for anything else."""
    if isinstance(record, bytes):
        record = record.decode("utf-8", errors="replace")
    parts = record.removesuffix("\0").split("=")
    return (parts[0], parts[1]) if len(parts) == 2 else None


def power_supply_states(records: Iterable[bytes | str]) -> Iterable[bool]:
    """Yield the mains-online state from every matching record."""
    for key, value in filter(None, map(parse_field, records)):
        log.debug("--- %s = %s", key, value)
        if key == "POWER_SUPPLY_ONLINE":
            yield value == "1"


async def listen() -> AsyncIterator[bool]:
    """Yield whether mains power is online at every power-supply change."""
    with socket.socket(socket.AF_NETLINK, socket.SOCK_RAW, NETLINK_KOBJECT_UEVENT) as sock:
        sock.bind((os.getpid(), 1))
        sock.setblocking(False)
        loop = asyncio.get_running_loop()
        while True:
            datagram = await loop.sock_recv(sock, 65536)
            for online in power_supply_states(datagram.split(b"\0")):
                yield online