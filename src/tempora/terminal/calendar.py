# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional, cast

import pendulum
import typer

from tempora.service.calendar_math import ViewGranularity
from tempora.service.style import index_tags
from tempora.state import get_now
from tempora.terminal.custom_typer import AliasedTyperGroup
from tempora.terminal.load import load_config, load_snapshot_or_exit
from tempora.terminal.parse import parse_date
from tempora.view.views.calendar import (
    calendar_grid_view,
    calendar_month_view,
    calendar_year_view,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DateOption = Annotated[
    Optional[pendulum.Date],
    typer.Option(
        "--date",
        "-d",
        parser=parse_date,
        help="Day inside the period to show (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
    ),
]
SnapshotOption = Annotated[
    Optional[Path],
    typer.Option("--snapshot", "-s", help="Snapshot file to read instead of the configured one"),
]


def _show(
    granularity: ViewGranularity,
    date: Optional[pendulum.Date],
    snapshot_path: Optional[Path],
) -> None:
    config = load_config()
    snapshot = load_snapshot_or_exit(snapshot_path)
    now = get_now()
    reference = date if date is not None else now.date()
    tags_by_id = index_tags(snapshot["tags"])

    if granularity == "month":
        calendar_month_view(
            reference, snapshot["actions"], snapshot["meetings"], tags_by_id, now
        )
    elif granularity == "year":
        calendar_year_view(
            reference, snapshot["actions"], snapshot["meetings"], tags_by_id, now
        )
    else:
        calendar_grid_view(
            granularity,
            reference,
            snapshot["actions"],
            snapshot["meetings"],
            tags_by_id,
            now,
            pixels_per_hour=config["pixels_per_hour"],
            day_window_start=config["day_window_start"],
        )


@app.command("show, s")
def show(date: DateOption = None, snapshot: SnapshotOption = None) -> None:
    """Show the configured default view."""
    _show(cast(ViewGranularity, load_config()["default_view"]), date, snapshot)


@app.command("day, d")
def day(date: DateOption = None, snapshot: SnapshotOption = None) -> None:
    """Show a single day on the time grid."""
    _show("day", date, snapshot)


@app.command("week, w")
def week(date: DateOption = None, snapshot: SnapshotOption = None) -> None:
    """Show the Monday to Sunday week on the time grid."""
    _show("week", date, snapshot)


@app.command("month, m")
def month(date: DateOption = None, snapshot: SnapshotOption = None) -> None:
    """Show the month as a grid of full weeks."""
    _show("month", date, snapshot)


@app.command("year, y")
def year(date: DateOption = None, snapshot: SnapshotOption = None) -> None:
    """Show which days of the year carry meetings and actions."""
    _show("year", date, snapshot)
