# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer
import typer.core
from rich.console import Console
from rich.padding import Padding

from weekgrid import state as app_state

console = Console()


def _show_active_user(ctx: click.Context) -> None:
    """Show the active user header once per invocation chain"""
    if getattr(ctx, "_user_shown", False):
        return

    current: Optional[click.Context] = ctx
    while current is not None:
        current._user_shown = True  # type: ignore[attr-defined]
        current = current.parent

    active_user = app_state.get_active_user()
    if active_user is None:
        return

    console.print()
    console.print(
        Padding(f"[bold plum1]Active User: {active_user}[/bold plum1]", (0, 0, 0, 1))
    )


class AliasedTyperGroup(typer.core.TyperGroup):
    """Custom TyperGroup that supports comma-separated command aliases"""

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Override to resolve aliases to the full command name"""
        cmd_name = self._group_cmd_name(cmd_name)
        return super().get_command(ctx, cmd_name)

    def _group_cmd_name(self, default_name: str) -> str:
        """Find the full command name if default_name is an alias"""
        for cmd in self.commands.values():
            name = cmd.name
            if name and default_name in self._CMD_SPLIT_P.split(name):
                return name
        return default_name

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        """Override to prevent duplicate commands from being added"""
        if name is None:
            name = cmd.name

        existing_name = self._group_cmd_name(name or "")
        if existing_name in self.commands and existing_name != name:
            return

        super().add_command(cmd, name)


class UserAwareTyperGroup(AliasedTyperGroup):
    """Aliased TyperGroup that shows the active user above its help text"""

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return commands in desired order (not insertion order due to Typer internals)"""
        desired_order = [
            "week, w",
            "schedule, s",
            "tag, t",
            "plan, p",
            "goal, g",
            "month, m",
            "user, u",
            "config, c",
        ]

        result = [name for name in desired_order if name in self.commands]
        result += [name for name in self.commands.keys() if name not in result]
        return result

    def format_help(
        self, ctx: click.Context, formatter: click.formatting.HelpFormatter
    ) -> None:
        _show_active_user(ctx)
        super().format_help(ctx, formatter)
