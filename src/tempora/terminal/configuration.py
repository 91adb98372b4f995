# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from tempora import configuration
from tempora.repository.configuration import CONFIGURATION_REPO, ConfigurationError
from tempora.service.calendar_math import VIEW_GRANULARITIES
from tempora.terminal.custom_typer import AliasedTyperGroup
from tempora.terminal.load import load_config

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _configuration_table(config: configuration.Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "snapshot_path",
        str(configuration.resolve_snapshot_path(config))
        + ("" if config["snapshot_path"] else " (default)"),
    )
    table.add_row("default_view", config["default_view"])
    table.add_row("pixels_per_hour", str(config["pixels_per_hour"]))
    table.add_row("day_window_start", f"{config['day_window_start']:02d}:00")
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(_configuration_table(load_config()))

    yaml_library_type = "untested"
    try:
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    snapshot_path: Annotated[
        Optional[str],
        typer.Option("--snapshot-path", help="Snapshot file read by default"),
    ] = None,
    remove_snapshot_path: Annotated[
        bool,
        typer.Option(
            "--remove-snapshot-path",
            help="Reset the snapshot path to the platform data directory",
        ),
    ] = False,
    default_view: Annotated[
        Optional[str],
        typer.Option(
            "--default-view",
            help=f"View used by 'calendar show' ({', '.join(VIEW_GRANULARITIES)})",
        ),
    ] = None,
    pixels_per_hour: Annotated[
        Optional[int],
        typer.Option("--pixels-per-hour", help="Grid height of one hour"),
    ] = None,
    day_window_start: Annotated[
        Optional[int],
        typer.Option("--day-window-start", help="Hour at which the time grid starts"),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Print report headers"),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    console = Console()

    try:
        CONFIGURATION_REPO.update_config(
            snapshot_path=snapshot_path,
            remove_snapshot_path=remove_snapshot_path,
            default_view=default_view,
            pixels_per_hour=pixels_per_hour,
            day_window_start=day_window_start,
            show_header=show_header,
        )
    except ConfigurationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    CONFIGURATION_REPO.flush()

    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(
        _configuration_table(CONFIGURATION_REPO.get_config(), title="Updated Configuration")
    )
