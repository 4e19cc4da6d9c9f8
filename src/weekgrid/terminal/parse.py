# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from weekgrid.model.errors import InvalidRecurrenceError, InvalidTimeError
from weekgrid.service.recurrence import normalize_weekday
from weekgrid.time import (
    MINUTES_PER_DAY,
    SLOT_MINUTES,
    add_days,
    date_from_str,
    date_to_str,
    to_minutes,
    to_time_string,
    today_str,
)


def parse_date(date_param: Optional[str | int]) -> Optional[str]:
    """
    Parse a date into "YYYY-MM-DD".

    Accepts YYYY-MM-DD, today (t), yesterday (y), tomorrow (o) or a day offset
    from today like 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_to_str(date_from_str(date))
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{date}': {e}")

    if re.match(r"^-?\d+$", date):
        return add_days(today_str(), int(date))

    if date == "today" or date == "t":
        return today_str()
    if date == "yesterday" or date == "y":
        return add_days(today_str(), -1)
    if date == "tomorrow" or date == "o":
        return add_days(today_str(), 1)
    raise typer.BadParameter("Incorrect date format")


def parse_month(month_param: Optional[str]) -> Optional[str]:
    """Parse a month into "YYYY-MM"; "this" or "t" is the current month."""
    if month_param is None:
        return None

    month = month_param.strip()
    if month == "this" or month == "t":
        return pendulum.today("local").format("YYYY-MM")

    match = re.match(r"^(\d{4})-(\d{1,2})$", month)
    if not match:
        raise typer.BadParameter(f"Month must be in YYYY-MM format, got '{month}'")
    month_number = int(match.group(2))
    if month_number < 1 or month_number > 12:
        raise typer.BadParameter(f"Month must be between 1 and 12, got {month_number}")
    return f"{match.group(1)}-{month_number:02d}"


def parse_slot_time(time_param: Optional[str]) -> Optional[str]:
    """
    Parse a (H)H:mm time on the half-hour grid into "HH:MM".

    24:00 is accepted so a schedule can end at midnight.
    """
    if time_param is None:
        return None

    try:
        minutes = to_minutes(time_param)
    except InvalidTimeError as e:
        raise typer.BadParameter(str(e))

    if minutes > MINUTES_PER_DAY:
        raise typer.BadParameter(f"Time must be between 00:00 and 24:00, got '{time_param}'")
    if minutes % SLOT_MINUTES != 0:
        raise typer.BadParameter(
            f"Time must be on the half hour (e.g. 9:00 or 9:30), got '{time_param}'"
        )
    return to_time_string(minutes)


def parse_hours(hours_param: Optional[str]) -> Optional[str]:
    """Parse a goal target given as HH:MM or whole hours into "HH:MM"."""
    if hours_param is None:
        return None

    hours = hours_param.strip()
    if re.match(r"^\d+$", hours):
        return f"{int(hours):02d}:00"

    try:
        return to_time_string(to_minutes(hours))
    except InvalidTimeError as e:
        raise typer.BadParameter(str(e))


def parse_weekdays(weekdays: Optional[list[str]]) -> list[str]:
    """
    Normalize weekday names. Each option may hold several comma separated
    names, e.g. --weekday mon,wed.
    """
    if not weekdays:
        return []

    names = [name for value in weekdays for name in value.split(",") if name.strip()]
    try:
        return [normalize_weekday(name) for name in names]
    except InvalidRecurrenceError as e:
        raise typer.BadParameter(str(e))
