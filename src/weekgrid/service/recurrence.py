# SPDX-License-Identifier: MIT

from weekgrid.model.errors import InvalidRecurrenceError
from weekgrid.time import add_days, weekday_index

WEEKDAYS = ["sun", "mon", "tue", "wed", "thu", "fri", "sat"]

_WEEKDAY_ALIASES = {
    "sunday": "sun",
    "monday": "mon",
    "tuesday": "tue",
    "wednesday": "wed",
    "thursday": "thu",
    "friday": "fri",
    "saturday": "sat",
    "일": "sun",
    "월": "mon",
    "화": "tue",
    "수": "wed",
    "목": "thu",
    "금": "fri",
    "토": "sat",
}


def normalize_weekday(name: str) -> str:
    key = name.strip().lower()
    key = _WEEKDAY_ALIASES.get(key, key)
    if key not in WEEKDAYS:
        raise InvalidRecurrenceError(f"Unknown weekday: {name}")
    return key


def expand_recurrence(
    base_date: str, repeat_count: int, interval: int, weekdays: list[str]
) -> list[str]:
    """
    Expand a recurrence request into the concrete dates it covers.

    For every repetition i in [0, repeat_count) and every selected weekday,
    the date is base_date shifted by
    (weekday - weekday of base_date) + i * 7 * interval days, so weekdays
    earlier in the week than base_date land before it. An empty weekday
    selection means the weekday of base_date. Dates come out ordered by
    repetition, then weekday (Sunday first).
    """
    if repeat_count < 1:
        raise InvalidRecurrenceError(f"Repeat count must be at least 1, got {repeat_count}")
    if interval < 1:
        raise InvalidRecurrenceError(f"Interval must be at least 1 week, got {interval}")

    base_index = weekday_index(base_date)
    if weekdays:
        indexes = sorted({WEEKDAYS.index(normalize_weekday(day)) for day in weekdays})
    else:
        indexes = [base_index]

    dates: list[str] = []
    for repetition in range(repeat_count):
        for index in indexes:
            offset_days = (index - base_index) + repetition * 7 * interval
            dates.append(add_days(base_date, offset_days))
    return dates
