# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from weekgrid.model.schedule import ScheduleForm
from weekgrid.service.calendar import CalendarSession
from weekgrid.service.schedule import get_schedule
from weekgrid.terminal.completion import complete_tag, complete_weekday
from weekgrid.terminal.custom_typer import UserAwareTyperGroup
from weekgrid.terminal.parse import parse_date, parse_month, parse_slot_time, parse_weekdays
from weekgrid.terminal.session import open_session, report_outcome, resolve_id
from weekgrid.time import month_of, today_str, week_of
from weekgrid.view.views import schedule as schedule_report

app = typer.Typer(cls=UserAwareTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"
TIME_HELP = "valid input: (H)H:mm on the half hour, 24:00 allowed as an end"


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    start: Annotated[
        str, typer.Option("--start", "-s", parser=parse_slot_time, help=TIME_HELP)
    ],
    end: Annotated[
        str, typer.Option("--end", "-e", parser=parse_slot_time, help=TIME_HELP)
    ],
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    tag: Annotated[
        str, typer.Option("--tag", "-t", autocompletion=complete_tag)
    ] = "",
    description: Annotated[
        Optional[str], typer.Option("--description", "-desc")
    ] = None,
    repeat: Annotated[
        int, typer.Option("--repeat", "-r", help="number of weekly repetitions")
    ] = 1,
    interval: Annotated[
        int, typer.Option("--interval", "-i", help="weeks between repetitions")
    ] = 1,
    weekdays: Annotated[
        Optional[list[str]],
        typer.Option(
            "--weekday",
            "-w",
            help="accepts multiple weekday options or a comma separated list, e.g. mon,wed",
            autocompletion=complete_weekday,
        ),
    ] = None,
) -> None:
    """
    Add a schedule, optionally repeated on weekdays over several weeks.
    Nothing is added if any occurrence overlaps an existing schedule.
    """
    session = open_session()
    form: ScheduleForm = {
        "title": title,
        "start": start,
        "end": end,
        "description": description,
        "tag": tag,
    }
    created = session.create_schedules(
        form,
        date or today_str(),
        {
            "repeat_count": repeat,
            "interval": interval,
            "weekdays": parse_weekdays(weekdays),
        },
    )
    report_outcome(session, bool(created))

    user_data = session.user_data
    schedule_report.schedules_report(
        session.user_id, "added", created, user_data["tags"], user_data["tag_items"]
    )


@app.command("move, mv", no_args_is_help=True)
def move(
    id: str,
    start: Annotated[
        str, typer.Option("--start", "-s", parser=parse_slot_time, help=TIME_HELP)
    ],
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    """Move a schedule to a new start, keeping its length."""
    session = open_session()
    schedule_id = resolve_id(session, id)
    current = get_schedule(session.schedules, schedule_id)

    accepted = session.move_schedule(schedule_id, date or current["date"], start)
    report_outcome(session, accepted)
    __show(session, schedule_id)


@app.command("resize, rs", no_args_is_help=True)
def resize(
    id: str,
    start: Annotated[
        Optional[str],
        typer.Option("--start", "-s", parser=parse_slot_time, help="move the top edge"),
    ] = None,
    end: Annotated[
        Optional[str],
        typer.Option("--end", "-e", parser=parse_slot_time, help="move the bottom edge"),
    ] = None,
) -> None:
    """Move the top or bottom edge of a schedule."""
    if (start is None) == (end is None):
        raise typer.BadParameter("Pass exactly one of --start or --end")

    session = open_session()
    schedule_id = resolve_id(session, id)
    if start is not None:
        accepted = session.resize_schedule(schedule_id, "top", start)
    else:
        accepted = session.resize_schedule(schedule_id, "bottom", end or "")
    report_outcome(session, accepted)
    __show(session, schedule_id)


@app.command("copy, cp", no_args_is_help=True)
def copy(
    id: str,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    start: Annotated[
        Optional[str],
        typer.Option("--start", "-s", parser=parse_slot_time, help=TIME_HELP),
    ] = None,
) -> None:
    """Paste a copy of a schedule on another day or time."""
    session = open_session()
    schedule_id = resolve_id(session, id)
    source = get_schedule(session.schedules, schedule_id)

    clone = session.copy_schedule(
        schedule_id, date or source["date"], start or source["start"]
    )
    report_outcome(session, clone is not None)
    if clone is not None:
        __show(session, clone["id"])


@app.command("delete, del", no_args_is_help=True)
def delete(id: str) -> None:
    session = open_session()
    schedule_id = resolve_id(session, id)
    report_outcome(session, session.delete_schedule(schedule_id))


@app.command("done, d", no_args_is_help=True)
def done(id: str) -> None:
    """Toggle a schedule between done and not done."""
    session = open_session()
    schedule_id = resolve_id(session, id)
    report_outcome(session, session.toggle_done(schedule_id))
    __show(session, schedule_id)


@app.command("edit, e", no_args_is_help=True)
def edit(
    id: str,
    title: Annotated[Optional[str], typer.Option("--title", "-ti")] = None,
    description: Annotated[
        Optional[str], typer.Option("--description", "-desc")
    ] = None,
    remove_description: Annotated[
        bool, typer.Option("--remove-description", "-rdesc")
    ] = False,
    tag: Annotated[
        Optional[str], typer.Option("--tag", "-t", autocompletion=complete_tag)
    ] = None,
    start: Annotated[
        Optional[str],
        typer.Option("--start", "-s", parser=parse_slot_time, help=TIME_HELP),
    ] = None,
    end: Annotated[
        Optional[str],
        typer.Option("--end", "-e", parser=parse_slot_time, help=TIME_HELP),
    ] = None,
) -> None:
    session = open_session()
    schedule_id = resolve_id(session, id)
    accepted = session.update_schedule(
        schedule_id,
        title=title,
        description=description,
        tag=tag,
        start=start,
        end=end,
        remove_description=remove_description,
    )
    report_outcome(session, accepted)
    __show(session, schedule_id)


@app.command("list, ls")
def list_schedules(
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", parser=parse_date, help="show the week of this date"),
    ] = None,
    month: Annotated[
        Optional[str],
        typer.Option("--month", "-m", parser=parse_month, help="valid input: YYYY-MM or this"),
    ] = None,
) -> None:
    """List the schedules of a week (default: this week) or a month."""
    session = open_session()
    user_data = session.user_data

    if month is not None:
        report_name = month
        schedules = [s for s in user_data["schedules"] if month_of(s["date"]) == month]
    else:
        week = week_of(date or today_str())
        report_name = f"week of {week[0]}"
        schedules = [s for s in user_data["schedules"] if s["date"] in week]

    schedule_report.schedules_report(
        session.user_id, report_name, schedules, user_data["tags"], user_data["tag_items"]
    )


def __show(session: CalendarSession, schedule_id: str) -> None:
    user_data = session.user_data
    schedule_report.single_schedule_report(
        session.user_id,
        get_schedule(user_data["schedules"], schedule_id),
        user_data["tags"],
        user_data["tag_items"],
    )
