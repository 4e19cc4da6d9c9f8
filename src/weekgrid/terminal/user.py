# SPDX-License-Identifier: MIT

import typer

from weekgrid import state as app_state
from weekgrid.repository.configuration import CONFIGURATION_REPO
from weekgrid.repository.gateway import get_user_data_gateway
from weekgrid.terminal.custom_typer import UserAwareTyperGroup
from weekgrid.view.views.user import users_report

app = typer.Typer(cls=UserAwareTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_users() -> None:
    """List the users that have saved data."""
    config = CONFIGURATION_REPO.get_config()
    gateway = get_user_data_gateway(config["storage_backend"])
    users_report(gateway.list_users(), app_state.get_active_user())
