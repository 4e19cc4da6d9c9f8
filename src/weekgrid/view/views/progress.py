# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from weekgrid.model.monthly_goal import TagProgress
from weekgrid.view.views.header import header

BAR_WIDTH = 20


def progress_bar(percentage: int, color: str) -> Text:
    # the bar stops at full width; the percentage itself is shown unclamped
    filled = round(BAR_WIDTH * min(max(percentage, 0), 100) / 100)
    bar = Text("█" * filled, style=color)
    bar.append("░" * (BAR_WIDTH - filled), style="grey30")
    return bar


def progress_report(active_user: str, month: str, progress: list[TagProgress]) -> None:
    header(active_user, f"progress {month}")

    progress_table = Table(box=box.SIMPLE)
    progress_table.add_column("type")
    progress_table.add_column("actual", justify="right")
    progress_table.add_column("goal", justify="right")
    progress_table.add_column("")
    progress_table.add_column("%", justify="right")

    for tag_progress in progress:
        color = tag_progress["color"]
        progress_table.add_row(
            Text(tag_progress["tag_type"], style=color),
            tag_progress["actual_time"],
            tag_progress["goal_time"] if tag_progress["goal_minutes"] else "-",
            progress_bar(tag_progress["percentage"], color),
            f"{tag_progress['percentage']}%",
        )

    console = Console()
    if not progress:
        console.print(f"No schedules or goals for {month}")
        return
    console.print(progress_table)
