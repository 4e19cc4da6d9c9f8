# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from weekgrid.terminal.parse import parse_date, parse_slot_time
from weekgrid.terminal.session import open_session
from weekgrid.time import today_str, week_of
from weekgrid.view.views.week import week_view


def week(
    date: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
    start: Annotated[
        Optional[str],
        typer.Option("--from", "-f", parser=parse_slot_time, help="first slot shown"),
    ] = None,
    end: Annotated[
        Optional[str],
        typer.Option("--to", parser=parse_slot_time, help="end of the last slot shown"),
    ] = None,
) -> None:
    """Show the week grid containing a date (default: today)."""
    session = open_session()
    user_data = session.user_data
    focused = date or today_str()

    week_view(
        session.user_id,
        week_of(focused),
        user_data["schedules"],
        user_data["tags"],
        user_data["tag_items"],
        session.week_totals(focused),
        start_time=start or "00:00",
        end_time=end or "24:00",
    )
