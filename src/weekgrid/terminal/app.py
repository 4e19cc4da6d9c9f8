# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from weekgrid import state as app_state
from weekgrid.terminal import (
    configuration,
    goal,
    month,
    plan,
    schedule,
    tag,
    user,
)
from weekgrid.terminal.completion import complete_user
from weekgrid.terminal.custom_typer import UserAwareTyperGroup
from weekgrid.terminal.week import week
from weekgrid.view import state as view_state

app = typer.Typer(
    cls=UserAwareTyperGroup,
    help="weekgrid - A half-hour week planner in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.add_typer(schedule.app, name="schedule, s")
app.add_typer(tag.app, name="tag, t")
app.add_typer(plan.app, name="plan, p")
app.add_typer(goal.app, name="goal, g")
app.add_typer(month.app, name="month, m")
app.add_typer(user.app, name="user, u")
app.command(name="week, w")(week)


@app.callback()
def main_callback(
    user_id: Annotated[
        Optional[str],
        typer.Option(
            "--user",
            "-u",
            help="user whose calendar to use (default: the configured default user)",
            autocompletion=complete_user,
        ),
    ] = None,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    weekgrid - A half-hour week planner in the CLI

    Global options that apply to all commands.
    """
    if user_id is not None:
        app_state.set_active_user(user_id)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
