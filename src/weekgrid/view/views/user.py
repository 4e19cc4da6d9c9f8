# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table


def users_report(users: list[str], active_user: Optional[str]) -> None:
    users_table = Table(box=box.SIMPLE)
    users_table.add_column("user")
    users_table.add_column("active")

    for user in users:
        users_table.add_row(user, "*" if user == active_user else "")

    console = Console()
    console.print(users_table)
