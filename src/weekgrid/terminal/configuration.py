# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from weekgrid import configuration
from weekgrid.repository.configuration import CONFIGURATION_REPO
from weekgrid.terminal.completion import complete_user
from weekgrid.terminal.custom_typer import UserAwareTyperGroup

app = typer.Typer(cls=UserAwareTyperGroup, no_args_is_help=True)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("storage_backend", config["storage_backend"])
    table.add_row("default_user", config["default_user"] or "None")
    table.add_row("slot_height_px", str(config["slot_height_px"]))
    table.add_row("auto_scroll_delay_ms", str(config["auto_scroll_delay_ms"]))
    table.add_row("auto_scroll_edge_px", str(config["auto_scroll_edge_px"]))
    table.add_row("notice_seconds", str(config["notice_seconds"]))
    table.add_row(
        "revert_on_save_failure",
        "✓ Enabled" if config["revert_on_save_failure"] else "✗ Disabled",
    )
    table.add_row("log_level", config.get("log_level", "WARNING"))

    console.print(table)

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="directory holding user data"),
    ] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", help="use the platform data directory")
    ] = False,
    storage_backend: Annotated[
        Optional[str],
        typer.Option("--storage-backend", help="document or rows"),
    ] = None,
    default_user: Annotated[
        Optional[str],
        typer.Option("--default-user", autocompletion=complete_user),
    ] = None,
    remove_default_user: Annotated[
        bool, typer.Option("--remove-default-user")
    ] = False,
    slot_height_px: Annotated[
        Optional[int], typer.Option("--slot-height-px", min=1)
    ] = None,
    auto_scroll_delay_ms: Annotated[
        Optional[int], typer.Option("--auto-scroll-delay-ms", min=0)
    ] = None,
    auto_scroll_edge_px: Annotated[
        Optional[int], typer.Option("--auto-scroll-edge-px", min=0)
    ] = None,
    notice_seconds: Annotated[
        Optional[int], typer.Option("--notice-seconds", min=0)
    ] = None,
    revert_on_save_failure: Annotated[
        Optional[bool],
        typer.Option(
            "--revert-on-save-failure/--no-revert-on-save-failure",
            help="restore the previous state when saving fails",
        ),
    ] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level")] = None,
) -> None:
    """Change configuration settings."""
    if storage_backend is not None and storage_backend not in ("document", "rows"):
        raise typer.BadParameter("Storage backend must be 'document' or 'rows'")
    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in LOG_LEVELS:
            raise typer.BadParameter(f"Log level must be one of {', '.join(LOG_LEVELS)}")

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        storage_backend=storage_backend,  # type: ignore[arg-type]
        default_user=default_user,
        remove_default_user=remove_default_user,
        slot_height_px=slot_height_px,
        auto_scroll_delay_ms=auto_scroll_delay_ms,
        auto_scroll_edge_px=auto_scroll_edge_px,
        notice_seconds=notice_seconds,
        revert_on_save_failure=revert_on_save_failure,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()
    view()
