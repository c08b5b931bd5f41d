"""Readers for system state and periodic update streams built on them."""

from __future__ import annotations

import asyncio
import inspect
import ipaddress
import logging
import math
import os
import socket
from pathlib import Path
from typing import Any, AsyncIterator, Callable

import aiohttp
import psutil

from .models import Battery, Brightness, Disk, IFace, Wttr

log = logging.getLogger(__name__)

BATTERY_DIR = Path("/sys/class/power_supply/BAT0")
BRIGHTNESS_PATH = Path("/sys/class/backlight/amdgpu_bl1/brightness")
WTTR_URL = "https://wttr.in/Copenhagen?format=%t"

NET_INTERVAL = 5.0


class SourceError(Exception):
    """Raised when a piece of system state cannot be read."""


def read_battery(directory: os.PathLike | str = BATTERY_DIR) -> Battery:
    """Read capacity and charging status from a power-supply directory."""
    directory = Path(directory)
    try:
        capacity = (directory / "capacity").read_text()
    except OSError as exc:
        raise SourceError(f"failed to open capacity file: {exc}") from exc
    try:
        status = (directory / "status").read_text()
    except OSError as exc:
        raise SourceError(f"failed to open status file: {exc}") from exc
    try:
        value = int(capacity.strip())
    except ValueError as exc:
        raise SourceError(f"failed to parse capacity: {exc}") from exc
    return Battery(charging=status == "Charging", capacity=value)


def read_brightness(path: os.PathLike | str = BRIGHTNESS_PATH) -> Brightness:
    """Read a raw 0-255 backlight value and scale it to percent."""
    try:
        raw = Path(path).read_text()
    except OSError as exc:
        raise SourceError(str(exc)) from exc
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise SourceError(str(exc)) from exc
    scaled = abs(value) * 100 // 255
    return Brightness(scaled if value >= 0 else -scaled)


def read_disk(path: os.PathLike | str = "/") -> Disk:
    """Return the used share of the filesystem holding ``path``."""
    try:
        stat = os.statvfs(path)
    except OSError as exc:
        raise SourceError(f"error getting disk usage: {exc}") from exc
    total = stat.f_blocks * stat.f_frsize
    available = stat.f_bavail * stat.f_frsize
    used = total - available
    percentage = used / total * 100.0 if total else math.nan
    return Disk(f"{percentage:.1f}%")


def _is_global_unicast(ip: ipaddress.IPv4Address | ipaddress.IPv6Address) -> bool:
    if ip.is_unspecified or ip.is_loopback or ip.is_multicast or ip.is_link_local:
        return False
    return not (ip.version == 4 and ip == ipaddress.IPv4Address("255.255.255.255"))


def find_interface() -> IFace:
    """Return the first interface that has a global unicast address."""
    for name, addresses in psutil.net_if_addrs().items():
        for entry in addresses:
            if entry.family not in (socket.AF_INET, socket.AF_INET6):
                continue
            text = entry.address.split("%", 1)[0]
            try:
                ip = ipaddress.ip_address(text)
            except ValueError as exc:
                raise SourceError(str(exc)) from exc
            if _is_global_unicast(ip):
                return IFace(name=name, addr=str(ip))
    raise SourceError("didn't find any global unicast")


async def fetch_weather(session: aiohttp.ClientSession, url: str = WTTR_URL) -> Wttr:
    """Fetch the weather text from ``url``."""
    async with session.get(url) as response:
        return Wttr(await response.text())


async def poll(
    getter: Callable[[], Any], interval: float, retry_interval: float
) -> AsyncIterator[str]:
    """Call ``getter`` repeatedly, yielding each result as text.

    Failures are logged and retried after ``retry_interval`` seconds;
    successes are followed by a pause of ``interval`` seconds.
    """
    while True:
        try:
            value = getter()
            if inspect.isawaitable(value):
                value = await value
        except Exception as exc:
            log.warning("%s", exc)
            await asyncio.sleep(retry_interval)
            continue
        yield str(value)
        await asyncio.sleep(interval)


def battery_updates() -> AsyncIterator[str]:
    """Battery readings every ten minutes."""
    return poll(read_battery, 600.0, 10.0)


def brightness_updates() -> AsyncIterator[str]:
    """Brightness readings every two seconds."""
    return poll(read_brightness, 2.0, 10.0)


def disk_updates() -> AsyncIterator[str]:
    """Disk usage readings every minute."""
    return poll(read_disk, 60.0, 10.0)


async def net_updates() -> AsyncIterator[str]:
    """Yield the network address whenever it changes."""
    last: IFace | None = None
    while True:
        try:
            iface = find_interface()
        except (SourceError, OSError) as exc:
            log.warning("%s", exc)
        else:
            if iface != last:
                last = iface
                yield str(iface)
        await asyncio.sleep(NET_INTERVAL)


async def weather_updates() -> AsyncIterator[str]:
    """Weather reports every ten minutes, retrying each minute on failure."""
    async with aiohttp.ClientSession() as session:
        async for item in poll(lambda: fetch_weather(session), 600.0, 60.0):
            yield item