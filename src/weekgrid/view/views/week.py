# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from weekgrid.model.schedule import Schedule
from weekgrid.model.tag import Tag, TagItem
from weekgrid.service.aggregation import TOTAL_KEY
from weekgrid.service.schedule import schedules_for_date
from weekgrid.time import (
    SLOT_MINUTES,
    current_time_line,
    date_from_str,
    to_minutes,
    to_time_string,
    today_str,
)
from weekgrid.view.views.header import header
from weekgrid.view.views.schedule import schedule_style, short_id


def __cell(
    schedules: list[Schedule], slot_start: int, tags: list[Tag], tag_items: list[TagItem]
) -> Text:
    for schedule in schedules:
        start = to_minutes(schedule["start"])
        end = to_minutes(schedule["end"])
        if not start <= slot_start < end:
            continue
        style = schedule_style(schedule, tags, tag_items)
        if slot_start == start:
            return Text(f"{schedule['title']} ({short_id(schedule)[:4]})", style=style)
        return Text("│", style=style)
    return Text("")


def week_view(
    active_user: str,
    week: list[str],
    schedules: list[Schedule],
    tags: list[Tag],
    tag_items: list[TagItem],
    totals: dict[str, str],
    start_time: str = "00:00",
    end_time: str = "24:00",
) -> None:
    """
    Display a Sunday-first week as a half-hour grid.

    Each schedule shows its title in the slot it starts in and a bar in the
    slots it continues through, colored by tag type. Completed schedules are
    dimmed and struck through. The week's per tag type totals follow the
    grid.
    """
    header(active_user, f"week of {week[0]}")

    today = today_str()
    # with a one pixel slot the offset is the index of the current slot
    now_slot = int(current_time_line(1)) * SLOT_MINUTES if today in week else None
    grid = Table(box=box.SIMPLE_HEAD, show_lines=False, pad_edge=False)
    grid.add_column("", style="grey50", no_wrap=True)
    for date in week:
        label = date_from_str(date).format("ddd MM-DD")
        grid.add_column(f"[bold]{label}[/bold]" if date == today else label, overflow="fold")

    by_date = {date: schedules_for_date(schedules, date) for date in week}
    for slot_start in range(to_minutes(start_time), to_minutes(end_time), SLOT_MINUTES):
        time_label = to_time_string(slot_start)
        grid.add_row(
            f"▶{time_label}" if slot_start == now_slot else time_label,
            *[__cell(by_date[date], slot_start, tags, tag_items) for date in week],
        )

    console = Console()
    console.print(grid)

    totals_table = Table(box=box.SIMPLE)
    totals_table.add_column("type")
    totals_table.add_column("time", justify="right")
    for tag_type, time in totals.items():
        if tag_type != TOTAL_KEY:
            totals_table.add_row(tag_type, time)
    totals_table.add_row("[bold]total[/bold]", f"[bold]{totals[TOTAL_KEY]}[/bold]")
    console.print(totals_table)
