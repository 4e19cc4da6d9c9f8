# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from weekgrid.model.tag import Tag, TagItem
from weekgrid.service.tag import display_color, tag_items_by_type
from weekgrid.view.views.header import header


def tags_report(active_user: str, tags: list[Tag], tag_items: list[TagItem]) -> None:
    header(active_user, "tags")

    tags_table = Table(box=box.SIMPLE)
    tags_table.add_column("type")
    tags_table.add_column("tags")

    for tag_type, tag_names in tag_items_by_type(tag_items).items():
        tags_table.add_row(
            Text(tag_type, style=display_color(tag_type, tags)),
            ", ".join(tag_names),
        )

    console = Console()
    console.print(tags_table)
