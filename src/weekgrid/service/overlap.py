# SPDX-License-Identifier: MIT

from weekgrid.model.schedule import Schedule
from weekgrid.time import to_minutes


def _intervals_overlap(
    candidate_start: int, candidate_end: int, existing_start: int, existing_end: int
) -> bool:
    return (
        (existing_start <= candidate_start < existing_end)
        or (existing_start < candidate_end <= existing_end)
        or (candidate_start <= existing_start and candidate_end >= existing_end)
    )


def find_conflicts(existing: list[Schedule], candidate: Schedule) -> list[Schedule]:
    """
    Return the schedules on the candidate's date whose [start, end) interval
    intersects the candidate's. The candidate itself (same id) is ignored,
    and touching intervals (one ends where the other starts) do not conflict.
    """
    candidate_start = to_minutes(candidate["start"])
    candidate_end = to_minutes(candidate["end"])

    return [
        schedule
        for schedule in existing
        if schedule["date"] == candidate["date"]
        and schedule["id"] != candidate["id"]
        and _intervals_overlap(
            candidate_start,
            candidate_end,
            to_minutes(schedule["start"]),
            to_minutes(schedule["end"]),
        )
    ]


def is_overlapping(existing: list[Schedule], candidate: Schedule) -> bool:
    return len(find_conflicts(existing, candidate)) > 0
