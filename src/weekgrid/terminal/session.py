# SPDX-License-Identifier: MIT

import typer
from rich.console import Console

from weekgrid import state as app_state
from weekgrid.color import OVERLAP_NOTICE_COLOR
from weekgrid.model.entity_id import EntityId
from weekgrid.model.errors import UnknownScheduleError
from weekgrid.repository.configuration import CONFIGURATION_REPO
from weekgrid.repository.gateway import get_user_data_gateway
from weekgrid.service.calendar import CalendarSession

console = Console()


def open_session() -> CalendarSession:
    """Load the active user's calendar."""
    user_id = app_state.get_active_user()
    if not user_id:
        raise typer.BadParameter(
            "No user selected: pass --user or set a default with 'config set --default-user'"
        )

    config = CONFIGURATION_REPO.get_config()
    gateway = get_user_data_gateway(config["storage_backend"])
    session = CalendarSession.from_config(user_id, gateway, config)
    session.load()
    return session


def resolve_id(session: CalendarSession, id_prefix: str) -> EntityId:
    try:
        return session.resolve_schedule_id(id_prefix)
    except UnknownScheduleError:
        raise typer.BadParameter(f"No single schedule matches id '{id_prefix}'")


def report_outcome(session: CalendarSession, accepted: bool) -> None:
    """
    Print the session notice, if any, and exit non-zero for a rejected
    change or a failed save.
    """
    message = session.notice.message
    if message is not None:
        console.print(f"[{OVERLAP_NOTICE_COLOR}]{message}[/{OVERLAP_NOTICE_COLOR}]")
    save_result = session.last_save_result
    if not accepted or (save_result is not None and not save_result["success"]):
        raise typer.Exit(1)
