# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from weekgrid.service.calendar import CalendarSession
from weekgrid.terminal.completion import complete_tag, complete_tag_type
from weekgrid.terminal.custom_typer import UserAwareTyperGroup
from weekgrid.terminal.session import open_session, report_outcome
from weekgrid.view.views import tag as tag_report

app = typer.Typer(cls=UserAwareTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    tag_type: Annotated[str, typer.Argument(autocompletion=complete_tag_type)],
    tag_name: str,
) -> None:
    """
    Add a tag under a tag type. A new tag type gets the next unused color.
    """
    session = open_session()
    report_outcome(session, session.add_tag_item(tag_type, tag_name))
    __show(session)


@app.command("remove, rm", no_args_is_help=True)
def remove(
    tag_type: Annotated[str, typer.Argument(autocompletion=complete_tag_type)],
    tag_name: Annotated[str, typer.Argument(autocompletion=complete_tag)],
) -> None:
    """
    Remove a tag. Schedules using it keep their tag and the tag type
    cached on them.
    """
    session = open_session()
    report_outcome(session, session.remove_tag_item(tag_type, tag_name))
    __show(session)


@app.command("remove-type, rmt", no_args_is_help=True)
def remove_type(
    tag_type: Annotated[str, typer.Argument(autocompletion=complete_tag_type)],
) -> None:
    """Remove a tag type together with all of its tags."""
    session = open_session()
    report_outcome(session, session.remove_tag_type(tag_type))
    __show(session)


@app.command("list, ls")
def list_tags() -> None:
    __show(open_session())


def __show(session: CalendarSession) -> None:
    user_data = session.user_data
    tag_report.tags_report(session.user_id, user_data["tags"], user_data["tag_items"])
