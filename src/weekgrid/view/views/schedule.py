# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from weekgrid.color import DONE_SCHEDULE_COLOR
from weekgrid.model.schedule import Schedule
from weekgrid.model.tag import Tag, TagItem
from weekgrid.service.tag import display_color, resolve_type
from weekgrid.time import display_date_str, to_minutes
from weekgrid.view.views.header import header

SHORT_ID_LENGTH = 8


def short_id(schedule: Schedule) -> str:
    return schedule["id"][:SHORT_ID_LENGTH]


def schedule_style(schedule: Schedule, tags: list[Tag], tag_items: list[TagItem]) -> str:
    if schedule["done"]:
        return f"strike {DONE_SCHEDULE_COLOR}"
    tag_type = resolve_type(schedule["tag"], tag_items, schedule["tag_type"])
    return display_color(tag_type, tags)


def schedules_report(
    active_user: str,
    report_name: str,
    schedules: list[Schedule],
    tags: list[Tag],
    tag_items: list[TagItem],
) -> None:
    header(active_user, report_name)

    schedules_table = Table(box=box.SIMPLE)
    schedules_table.add_column("id")
    schedules_table.add_column("date")
    schedules_table.add_column("time")
    schedules_table.add_column("title")
    schedules_table.add_column("tag")
    schedules_table.add_column("type")
    schedules_table.add_column("description")

    ordered = sorted(schedules, key=lambda s: (s["date"], to_minutes(s["start"])))
    for schedule in ordered:
        style = schedule_style(schedule, tags, tag_items)
        schedules_table.add_row(
            short_id(schedule),
            display_date_str(schedule["date"]),
            f"{schedule['start']}-{schedule['end']}",
            Text(schedule["title"], style=style),
            schedule["tag"],
            resolve_type(schedule["tag"], tag_items, schedule["tag_type"]),
            schedule["description"] or "",
        )

    console = Console()
    console.print(schedules_table)


def single_schedule_report(
    active_user: str,
    schedule: Schedule,
    tags: list[Tag],
    tag_items: list[TagItem],
) -> None:
    schedules_report(active_user, "schedule", [schedule], tags, tag_items)
