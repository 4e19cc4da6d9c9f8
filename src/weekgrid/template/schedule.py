# SPDX-License-Identifier: MIT

from weekgrid.model.entity_id import generate_entity_id
from weekgrid.model.schedule import Recurrence, Schedule


def get_schedule_template() -> Schedule:
    return {
        "id": generate_entity_id(),
        "date": "",
        "start": "",
        "end": "",
        "title": "",
        "description": None,
        "tag": "",
        "tag_type": "",
        "done": False,
    }


def get_recurrence_template() -> Recurrence:
    return {
        "repeat_count": 1,
        "interval": 1,
        "weekdays": [],
    }
