# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from weekgrid.view.state import get_show_header


def header(active_user: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the active user.

    Args:
        active_user: The user whose calendar is shown
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"

    print(Padding("[dark_orange]weekgrid[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(f"[plum1]{active_user}[/plum1]", (0, 1)))
