"""Values shown in the status bar, each rendered by ``str()``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Battery:
    """Battery charge level and whether it is charging."""

    charging: bool
    capacity: int

    def __str__(self) -> str:
        if self.charging:
            return f" ⚡ {self.capacity} "
        if self.capacity < 50:
            return f" 🪫 {self.capacity} "
        return f" 🔋 {self.capacity} "


@dataclass(frozen=True)
class Brightness:
    """Screen brightness in percent."""

    percent: int

    def __str__(self) -> str:
        return f" 🔆 {self.percent}% "


@dataclass(frozen=True)
class Disk:
    """Disk usage, already formatted as a percentage string."""

    usage: str

    def __str__(self) -> str:
        return f" 💾 {self.usage} "


@dataclass(frozen=True)
class IFace:
    """A network interface and its address."""

    name: str
    addr: str

    def __str__(self) -> str:
        return f" 📡 {self.addr} "


@dataclass(frozen=True)
class Text:
    """The visible window of the scrolling text."""

    content: str

    def __str__(self) -> str:
        return f" 👽 {self.content}◀ "


@dataclass(frozen=True)
class Clock:
    """Time of day."""

    text: str

    def __str__(self) -> str:
        return f" 🕒 {self.text} "


@dataclass(frozen=True)
class Calendar:
    """Calendar date."""

    text: str

    def __str__(self) -> str:
        return f" 📅 {self.text} "


@dataclass(frozen=True)
class WeekNo:
    """ISO week number label."""

    text: str

    def __str__(self) -> str:
        return f" 📅 {self.text} "


@dataclass(frozen=True)
class Day:
    """Name of the weekday."""

    text: str

    def __str__(self) -> str:
        return f" 📅 {self.text} "


@dataclass(frozen=True)
class Volume:
    """Audio volume in percent."""

    percent: int

    def __str__(self) -> str:
        return f" 🎵 {self.percent}% "


@dataclass(frozen=True)
class Wttr:
    """Weather report text as returned by the weather service."""

    temp: str

    def __str__(self) -> str:
        return self.temp


class Watchface(Enum):
    """What the clock segment currently shows."""

    CLOCK = 0
    DATE = 1
    WEEKNUMBER = 2
    DAY = 3

    def next(self) -> Watchface:
        """Return the face shown after this one, wrapping around."""
        faces = list(type(self))
        return faces[(faces.index(self) + 1) % len(faces)]