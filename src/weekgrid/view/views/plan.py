# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from weekgrid.model.monthly_goal import Goal
from weekgrid.model.monthly_plan import MonthlyPlan
from weekgrid.view.views.header import header


def plans_report(
    active_user: str, month: str, plans: list[MonthlyPlan], goals: list[Goal]
) -> None:
    header(active_user, f"plans {month}")

    plans_table = Table(box=box.SIMPLE)
    plans_table.add_column("id")
    plans_table.add_column("type")
    plans_table.add_column("tag")
    plans_table.add_column("name")
    plans_table.add_column("hours", justify="right")
    plans_table.add_column("description")

    for plan in plans:
        plans_table.add_row(
            plan["id"][:8],
            plan["tag_type"],
            plan["tag"],
            plan["name"],
            str(plan["estimated_time"]),
            plan["description"] or "",
        )

    goals_table = Table(box=box.SIMPLE)
    goals_table.add_column("type")
    goals_table.add_column("goal", justify="right")
    for goal in goals:
        goals_table.add_row(goal["tag_type"], goal["target_hours"])

    console = Console()
    console.print(plans_table)
    console.print(goals_table)
