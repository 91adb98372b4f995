# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from tempora.model.accounting import DateRange
from tempora.service.accounting import Period, summarize, year_report
from tempora.service.dashboard import build_dashboard
from tempora.state import get_now
from tempora.terminal.custom_typer import AliasedTyperGroup
from tempora.terminal.load import load_snapshot_or_exit
from tempora.terminal.parse import parse_date
from tempora.view.views.accounting import (
    dashboard_view,
    summary_report,
    year_report_view,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

SnapshotOption = Annotated[
    Optional[Path],
    typer.Option("--snapshot", "-s", help="Snapshot file to read instead of the configured one"),
]
YearOption = Annotated[
    Optional[int],
    typer.Option("--year", "-y", help="Calendar year (defaults to the current year)"),
]


def _resolve_period(
    year: Optional[int],
    start: Optional[pendulum.Date],
    end: Optional[pendulum.Date],
    today: pendulum.Date,
) -> tuple[Period, str]:
    console = Console()

    if start is None and end is None:
        query_year = year if year is not None else today.year
        return query_year, str(query_year)

    if year is not None:
        console.print("[red]Error: use either --year or --start/--end, not both[/red]")
        raise typer.Exit(1)
    if start is None or end is None:
        console.print("[red]Error: --start and --end must be given together[/red]")
        raise typer.Exit(1)
    if end < start:
        console.print("[red]Error: --end must not be before --start[/red]")
        raise typer.Exit(1)

    date_range: DateRange = {"start": start, "end": end}
    return date_range, f"{start.to_date_string()} - {end.to_date_string()}"


@app.command("summary, s")
def summary(
    year: YearOption = None,
    start: Annotated[
        Optional[pendulum.Date],
        typer.Option("--start", parser=parse_date, help="First day of the range (inclusive)"),
    ] = None,
    end: Annotated[
        Optional[pendulum.Date],
        typer.Option("--end", parser=parse_date, help="Last day of the range (inclusive)"),
    ] = None,
    snapshot: SnapshotOption = None,
) -> None:
    """Credited against expected hours, overtime and vacation balance."""
    today = get_now().date()
    period, label = _resolve_period(year, start, end, today)
    data = load_snapshot_or_exit(snapshot)
    summary_report(
        label, summarize(data["time_entries"], data["settings"], period, today)
    )


@app.command("year, y")
def year(year: YearOption = None, snapshot: SnapshotOption = None) -> None:
    """Yearly overview by entry type with planned vacation."""
    today = get_now().date()
    data = load_snapshot_or_exit(snapshot)
    year_report_view(
        year_report(
            data["time_entries"],
            data["settings"],
            year if year is not None else today.year,
            today,
        )
    )


@app.command("dashboard, d")
def dashboard(snapshot: SnapshotOption = None) -> None:
    """Overdue and focus actions, upcoming meetings and time logged today."""
    data = load_snapshot_or_exit(snapshot)
    dashboard_view(
        build_dashboard(
            data["actions"], data["meetings"], data["time_entries"], get_now()
        )
    )
