import pytest

from statusbar.models import (
    Battery,
    Brightness,
    Calendar,
    Clock,
    Day,
    Disk,
    IFace,
    Text,
    Volume,
    Watchface,
    WeekNo,
    Wttr,
)


@pytest.mark.parametrize(
    "battery, expected",
    [
        (Battery(charging=True, capacity=80), " ⚡ 80 "),
        (Battery(charging=True, capacity=10), " ⚡ 10 "),
        (Battery(charging=False, capacity=49), " 🪫 49 "),
        (Battery(charging=False, capacity=50), " 🔋 50 "),
    ],
)
def test_battery_str(battery, expected):
    assert str(battery) == expected


def test_brightness_str():
    assert str(Brightness(42)) == " 🔆 42% "


def test_disk_str():
    assert str(Disk("37.5%")) == " 💾 37.5% "


def test_iface_shows_address_only():
    assert str(IFace(name="eth0", addr="10.0.0.7")) == " 📡 10.0.0.7 "


def test_text_str():
    assert str(Text("hello")) == " 👽 hello◀ "


@pytest.mark.parametrize(
    "value, expected",
    [
        (Clock("12:30"), " 🕒 12:30 "),
        (Calendar("05 Mar 2024"), " 📅 05 Mar 2024 "),
        (WeekNo("Week: 7"), " 📅 Week: 7 "),
        (Day("Tuesday"), " 📅 Tuesday "),
    ],
)
def test_time_faces_str(value, expected):
    assert str(value) == expected


def test_volume_str():
    assert str(Volume(65)) == " 🎵 65% "


def test_wttr_is_raw_text():
    assert str(Wttr("+4°C")) == "+4°C"


def test_watchface_order():
    assert Watchface.CLOCK.next() is Watchface.DATE
    assert Watchface.DATE.next() is Watchface.WEEKNUMBER
    assert Watchface.WEEKNUMBER.next() is Watchface.DAY
    assert Watchface.DAY.next() is Watchface.CLOCK


@pytest.mark.parametrize("face", list(Watchface))
def test_watchface_cycle_visits_every_face(face):
    visited = []
    current = face
    for _ in range(len(Watchface)):
        visited.append(current)
        current = Watchface.next(current)
    assert current is face
    assert set(visited) == set(Watchface)