# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from weekgrid.terminal.completion import complete_tag_type
from weekgrid.terminal.custom_typer import UserAwareTyperGroup
from weekgrid.terminal.parse import parse_hours, parse_month
from weekgrid.terminal.session import open_session, report_outcome
from weekgrid.time import current_month
from weekgrid.view.views import progress as progress_report

app = typer.Typer(cls=UserAwareTyperGroup, no_args_is_help=True)

MONTH_HELP = "valid input: YYYY-MM or this (default: this month)"


@app.command("set, s", no_args_is_help=True)
def set(
    tag_type: Annotated[str, typer.Argument(autocompletion=complete_tag_type)],
    target: Annotated[
        str,
        typer.Argument(parser=parse_hours, help="valid input: HH:MM or whole hours"),
    ],
    month: Annotated[
        Optional[str], typer.Option("--month", "-m", parser=parse_month, help=MONTH_HELP)
    ] = None,
) -> None:
    """Set the monthly goal of a tag type."""
    session = open_session()
    month = month or current_month()
    report_outcome(session, session.set_goal(month, tag_type, target))
    progress_report.progress_report(session.user_id, month, session.progress(month))


@app.command("remove, rm", no_args_is_help=True)
def remove(
    tag_type: Annotated[str, typer.Argument(autocompletion=complete_tag_type)],
    month: Annotated[
        Optional[str], typer.Option("--month", "-m", parser=parse_month, help=MONTH_HELP)
    ] = None,
) -> None:
    session = open_session()
    month = month or current_month()
    report_outcome(session, session.remove_goal(month, tag_type))
    progress_report.progress_report(session.user_id, month, session.progress(month))


@app.command("derive, d")
def derive(
    month: Annotated[
        Optional[str], typer.Option("--month", "-m", parser=parse_month, help=MONTH_HELP)
    ] = None,
) -> None:
    """Set the month's goals to the summed estimates of its plans."""
    session = open_session()
    month = month or current_month()
    report_outcome(session, session.derive_goals(month))
    progress_report.progress_report(session.user_id, month, session.progress(month))


@app.command("progress, p")
def progress(
    month: Annotated[
        Optional[str], typer.Option("--month", "-m", parser=parse_month, help=MONTH_HELP)
    ] = None,
) -> None:
    """Show scheduled time against goals per tag type."""
    session = open_session()
    month = month or current_month()
    progress_report.progress_report(session.user_id, month, session.progress(month))
