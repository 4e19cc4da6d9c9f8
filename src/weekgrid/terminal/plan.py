# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from weekgrid.model.entity_id import EntityId
from weekgrid.service.aggregation import goals_for_month, plans_for_month
from weekgrid.service.calendar import CalendarSession
from weekgrid.terminal.completion import complete_tag
from weekgrid.terminal.custom_typer import UserAwareTyperGroup
from weekgrid.terminal.parse import parse_month
from weekgrid.terminal.session import open_session, report_outcome
from weekgrid.time import current_month
from weekgrid.view.views import plan as plan_report

app = typer.Typer(cls=UserAwareTyperGroup, no_args_is_help=True)

MONTH_HELP = "valid input: YYYY-MM or this (default: this month)"


@app.command("add, a", no_args_is_help=True)
def add(
    tag: Annotated[str, typer.Argument(autocompletion=complete_tag)],
    name: str,
    hours: Annotated[
        int, typer.Option("--hours", "-hr", help="estimated hours for the month")
    ] = 0,
    month: Annotated[
        Optional[str], typer.Option("--month", "-m", parser=parse_month, help=MONTH_HELP)
    ] = None,
    description: Annotated[
        Optional[str], typer.Option("--description", "-desc")
    ] = None,
) -> None:
    """
    Add a monthly plan. The month's goals are re-derived from its plans.
    """
    session = open_session()
    plan = session.add_plan(tag, name, hours, month or current_month(), description)
    report_outcome(session, plan is not None)
    __show(session, month or current_month())


@app.command("remove, rm", no_args_is_help=True)
def remove(id: str) -> None:
    """
    Remove a monthly plan. Goals of tag types left without plans are dropped.
    """
    session = open_session()
    plan_id = __resolve_plan_id(session, id)
    month = next(
        plan["month"] for plan in session.user_data["monthly_plans"] if plan["id"] == plan_id
    )
    report_outcome(session, session.remove_plan(plan_id))
    __show(session, month)


@app.command("list, ls")
def list_plans(
    month: Annotated[
        Optional[str], typer.Option("--month", "-m", parser=parse_month, help=MONTH_HELP)
    ] = None,
) -> None:
    __show(open_session(), month or current_month())


def __resolve_plan_id(session: CalendarSession, id_prefix: str) -> EntityId:
    matches = [
        plan["id"]
        for plan in session.user_data["monthly_plans"]
        if plan["id"].startswith(id_prefix)
    ]
    if len(matches) != 1:
        raise typer.BadParameter(f"No single plan matches id '{id_prefix}'")
    return matches[0]


def __show(session: CalendarSession, month: str) -> None:
    user_data = session.user_data
    plan_report.plans_report(
        session.user_id,
        month,
        plans_for_month(user_data["monthly_plans"], month),
        goals_for_month(user_data["monthly_goals"], month),
    )
