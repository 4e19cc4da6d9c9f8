# SPDX-License-Identifier: MIT

import math
import re
from typing import cast

import pendulum

from weekgrid.model.errors import InvalidTimeError

SLOT_MINUTES = 30
SLOTS_PER_DAY = 48
MINUTES_PER_DAY = 24 * 60
DEFAULT_SLOT_HEIGHT_PX = 24

_TIME_PATTERN = re.compile(r"^(\d+):(\d{2})$")


def to_minutes(time: str) -> int:
    """
    Parse an "HH:MM" string into minutes. Hours are unbounded so durations
    and monthly targets such as "120:00" parse too.
    """
    match = _TIME_PATTERN.match(time.strip()) if isinstance(time, str) else None
    if match is None:
        raise InvalidTimeError(f"Time must be in HH:MM format, got '{time}'")
    hours = int(match.group(1))
    minutes = int(match.group(2))
    if minutes > 59:
        raise InvalidTimeError(f"Minute must be between 0 and 59, got {minutes}")
    return hours * 60 + minutes


def to_time_string(minutes: int) -> str:
    """
    Format a minute count as zero padded "HH:MM".

    Values past a day are kept (e.g. 1530 -> "25:30") so the function can be
    used for durations; callers setting a start or end bound it themselves.
    """
    hours, remainder = divmod(minutes, 60)
    return f"{hours:02d}:{remainder:02d}"


def nearest_slot(pixel_offset: float, slot_height_px: float) -> str:
    slot_index = round_half_up(pixel_offset / slot_height_px)
    if slot_index < 0:
        slot_index = 0
    return to_time_string(slot_index * SLOT_MINUTES)


def slot_pixel_position(time: str, slot_height_px: float) -> float:
    return (to_minutes(time) / SLOT_MINUTES) * slot_height_px


def round_half_up(value: float) -> int:
    # halves round toward +infinity, so 0.5 of a slot snaps down the grid
    return math.floor(value + 0.5)


def time_slots() -> list[str]:
    """The grid labels 00:00, 00:30, ... 23:30."""
    return [to_time_string(i * SLOT_MINUTES) for i in range(SLOTS_PER_DAY)]


def duration_minutes(start: str, end: str) -> int:
    return to_minutes(end) - to_minutes(start)


def current_time_line(slot_height_px: float) -> float:
    now = pendulum.now("local")
    return ((now.hour * 60 + now.minute) / SLOT_MINUTES) * slot_height_px


def date_from_str(date: str) -> pendulum.Date:
    return cast(pendulum.DateTime, pendulum.parse(date, tz="local")).date()


def date_to_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def today_str() -> str:
    return date_to_str(pendulum.today("local").date())


def month_of(date: str) -> str:
    """'YYYY-MM-DD' -> 'YYYY-MM'"""
    return date[:7]


def current_month() -> str:
    return pendulum.today("local").format("YYYY-MM")


def weekday_index(date: str) -> int:
    """Sunday-first weekday index (Sunday = 0 ... Saturday = 6)."""
    return (date_from_str(date).isoweekday()) % 7


def add_days(date: str, days: int) -> str:
    return date_to_str(date_from_str(date).add(days=days))


def week_of(date: str) -> list[str]:
    """The Sunday-first week containing date."""
    sunday = date_from_str(date).subtract(days=weekday_index(date))
    return [date_to_str(sunday.add(days=offset)) for offset in range(7)]


def month_days(month: str) -> list[str]:
    first = cast(pendulum.DateTime, pendulum.parse(f"{month}-01", tz="local")).date()
    return [date_to_str(first.add(days=offset)) for offset in range(first.days_in_month)]


def display_date_str(date: str) -> str:
    return date_from_str(date).format("YYYY-MM-DD ddd")


def now_iso_str() -> str:
    return pendulum.now("UTC").isoformat()
