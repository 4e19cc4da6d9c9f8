# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from weekgrid.service.aggregation import goals_for_month, plans_for_month
from weekgrid.terminal.custom_typer import UserAwareTyperGroup
from weekgrid.terminal.parse import parse_month
from weekgrid.terminal.session import open_session, report_outcome
from weekgrid.time import current_month
from weekgrid.view.views import plan as plan_report
from weekgrid.view.views import progress as progress_report

app = typer.Typer(cls=UserAwareTyperGroup, no_args_is_help=True)

MONTH_HELP = "valid input: YYYY-MM or this (default: this month)"


@app.command("report, r")
def report(
    month: Annotated[
        Optional[str], typer.Option("--month", "-m", parser=parse_month, help=MONTH_HELP)
    ] = None,
) -> None:
    """Show the month's progress, plans and goals."""
    session = open_session()
    month = month or current_month()
    user_data = session.user_data

    progress_report.progress_report(session.user_id, month, session.progress(month))
    plan_report.plans_report(
        session.user_id,
        month,
        plans_for_month(user_data["monthly_plans"], month),
        goals_for_month(user_data["monthly_goals"], month),
    )


@app.command("clear", no_args_is_help=True)
def clear(
    month: Annotated[
        str, typer.Option("--month", "-m", parser=parse_month, help="valid input: YYYY-MM or this")
    ],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """Delete every schedule and goal of a month. Plans are kept."""
    if not yes:
        typer.confirm(f"Delete all schedules and goals of {month}?", abort=True)

    session = open_session()
    report_outcome(session, session.clear_month(month))
    progress_report.progress_report(session.user_id, month, session.progress(month))
