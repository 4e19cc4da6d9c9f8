# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from weekgrid.model.entity_id import EntityId, generate_entity_id
from weekgrid.model.errors import (
    InvalidTimeRangeError,
    OverlapError,
    UnknownScheduleError,
)
from weekgrid.model.interaction import ResizeEdge
from weekgrid.model.schedule import Recurrence, Schedule, ScheduleForm
from weekgrid.model.tag import TagItem
from weekgrid.service.overlap import find_conflicts
from weekgrid.service.recurrence import expand_recurrence
from weekgrid.template.schedule import get_recurrence_template, get_schedule_template
from weekgrid.time import MINUTES_PER_DAY, duration_minutes, to_minutes, to_time_string


def get_schedule(schedules: list[Schedule], schedule_id: EntityId) -> Schedule:
    for schedule in schedules:
        if schedule["id"] == schedule_id:
            return deepcopy(schedule)
    raise UnknownScheduleError(schedule_id)


def schedules_for_date(schedules: list[Schedule], date: str) -> list[Schedule]:
    return sorted(
        (schedule for schedule in schedules if schedule["date"] == date),
        key=lambda schedule: to_minutes(schedule["start"]),
    )


def lookup_tag_type(tag: str, tag_items: list[TagItem]) -> str:
    """Tag type cached on a schedule; empty when the tag is unknown."""
    for tag_item in tag_items:
        if tag_item["tag_name"] == tag:
            return tag_item["tag_type"]
    return ""


def validate_time_range(start: str, end: str) -> None:
    start_minutes = to_minutes(start)
    end_minutes = to_minutes(end)
    if start_minutes >= end_minutes:
        raise InvalidTimeRangeError(f"Start {start} must be before end {end}")
    if end_minutes > MINUTES_PER_DAY:
        raise InvalidTimeRangeError(f"End {end} is past the end of the day")


def ensure_no_overlap(schedules: list[Schedule], candidate: Schedule) -> None:
    conflicts = find_conflicts(schedules, candidate)
    if conflicts:
        raise OverlapError(
            f"{candidate['date']} {candidate['start']}-{candidate['end']} overlaps "
            + ", ".join(f"{c['start']}-{c['end']} {c['title']}" for c in conflicts),
            [conflict["id"] for conflict in conflicts],
        )


def __replace(schedules: list[Schedule], updated: Schedule) -> list[Schedule]:
    return [
        updated if schedule["id"] == updated["id"] else schedule
        for schedule in schedules
    ]


def build_schedule(form: ScheduleForm, date: str, tag_items: list[TagItem]) -> Schedule:
    schedule = get_schedule_template()
    schedule["date"] = date
    schedule["start"] = form["start"]
    schedule["end"] = form["end"]
    schedule["title"] = form["title"]
    schedule["description"] = form["description"] or None
    schedule["tag"] = form["tag"]
    schedule["tag_type"] = lookup_tag_type(form["tag"], tag_items)
    return schedule


def create_schedules(
    schedules: list[Schedule],
    form: ScheduleForm,
    base_date: str,
    tag_items: list[TagItem],
    recurrence: Optional[Recurrence] = None,
) -> tuple[list[Schedule], list[Schedule]]:
    """
    Create one schedule, or one per date of a recurrence, from a form.

    Each generated schedule is checked against the existing schedules and
    the ones generated before it. If any of them overlaps the whole batch is
    rejected and nothing is created.

    Returns:
        Tuple of (all schedules after the change, the created schedules)
    """
    if recurrence is None:
        recurrence = get_recurrence_template()

    validate_time_range(form["start"], form["end"])
    dates = expand_recurrence(
        base_date,
        recurrence["repeat_count"],
        recurrence["interval"],
        recurrence["weekdays"],
    )

    accepted = list(schedules)
    created: list[Schedule] = []
    for date in dates:
        candidate = build_schedule(form, date, tag_items)
        ensure_no_overlap(accepted, candidate)
        accepted.append(candidate)
        created.append(candidate)

    return accepted, created


def move_schedule(
    schedules: list[Schedule], schedule_id: EntityId, new_date: str, new_start: str
) -> list[Schedule]:
    """Move a schedule to new_date/new_start, keeping its duration."""
    schedule = get_schedule(schedules, schedule_id)
    duration = duration_minutes(schedule["start"], schedule["end"])
    new_end = to_time_string(to_minutes(new_start) + duration)
    validate_time_range(new_start, new_end)

    schedule["date"] = new_date
    schedule["start"] = new_start
    schedule["end"] = new_end
    ensure_no_overlap(schedules, schedule)
    return __replace(schedules, schedule)


def resize_schedule(
    schedules: list[Schedule],
    schedule_id: EntityId,
    edge: ResizeEdge,
    new_time: str,
) -> list[Schedule]:
    """
    Move one edge of a schedule. The top edge sets start and keeps end, the
    bottom edge sets end and keeps start.
    """
    schedule = get_schedule(schedules, schedule_id)
    if edge == "top":
        validate_time_range(new_time, schedule["end"])
        schedule["start"] = new_time
    elif edge == "bottom":
        validate_time_range(schedule["start"], new_time)
        schedule["end"] = new_time
    else:
        raise ValueError(f"Unknown resize edge: {edge}")

    ensure_no_overlap(schedules, schedule)
    return __replace(schedules, schedule)


def copy_schedule(
    schedules: list[Schedule], source: Schedule, new_date: str, new_start: str
) -> tuple[list[Schedule], Schedule]:
    """Paste a clone of source with a new id at new_date/new_start."""
    duration = duration_minutes(source["start"], source["end"])
    new_end = to_time_string(to_minutes(new_start) + duration)
    validate_time_range(new_start, new_end)

    clone = deepcopy(source)
    clone["id"] = generate_entity_id()
    clone["date"] = new_date
    clone["start"] = new_start
    clone["end"] = new_end
    ensure_no_overlap(schedules, clone)
    return [*schedules, clone], clone


def delete_schedule(schedules: list[Schedule], schedule_id: EntityId) -> list[Schedule]:
    return [schedule for schedule in schedules if schedule["id"] != schedule_id]


def toggle_done(schedules: list[Schedule], schedule_id: EntityId) -> list[Schedule]:
    schedule = get_schedule(schedules, schedule_id)
    schedule["done"] = not schedule["done"]
    return __replace(schedules, schedule)


def update_schedule(
    schedules: list[Schedule],
    schedule_id: EntityId,
    tag_items: list[TagItem],
    title: Optional[str] = None,
    description: Optional[str] = None,
    tag: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    remove_description: bool = False,
) -> list[Schedule]:
    schedule = get_schedule(schedules, schedule_id)
    if title is not None:
        schedule["title"] = title
    if description is not None:
        schedule["description"] = description
    if remove_description:
        schedule["description"] = None
    if tag is not None:
        schedule["tag"] = tag
        schedule["tag_type"] = lookup_tag_type(tag, tag_items)

    if start is not None or end is not None:
        new_start = start if start is not None else schedule["start"]
        new_end = end if end is not None else schedule["end"]
        validate_time_range(new_start, new_end)
        schedule["start"] = new_start
        schedule["end"] = new_end
        ensure_no_overlap(schedules, schedule)

    return __replace(schedules, schedule)
