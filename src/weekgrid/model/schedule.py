# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from weekgrid.model.entity_id import EntityId


class Schedule(TypedDict):
    id: EntityId
    date: str
    start: str
    end: str
    title: str
    description: Optional[str]
    tag: str
    tag_type: str
    done: bool


class ScheduleForm(TypedDict):
    title: str
    start: str
    end: str
    description: Optional[str]
    tag: str


class Recurrence(TypedDict):
    repeat_count: int
    interval: int
    weekdays: list[str]
