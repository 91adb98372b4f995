# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional, cast

import pendulum
import typer
from rich.console import Console

from tempora.model.recurrence import RecurrenceRule, RecurrenceUnit
from tempora.repository.snapshot import save_meetings
from tempora.service.meeting import MeetingValidationError
from tempora.service.recurrence import RecurrenceValidationError, expand
from tempora.terminal.custom_typer import AliasedTyperGroup
from tempora.terminal.parse import parse_date, parse_datetime, parse_unit
from tempora.template.meeting import get_meeting_template
from tempora.view.views.meeting import meetings_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("expand, e")
def expand_meeting(
    title: Annotated[str, typer.Argument(help="Meeting title")],
    start: Annotated[
        pendulum.DateTime,
        typer.Option(
            "--start",
            parser=parse_datetime,
            help="First occurrence (YYYY-MM-DD HH:mm, or HH:mm today)",
        ),
    ],
    end: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--end",
            parser=parse_datetime,
            help="End of the first occurrence (defaults to one hour after start)",
        ),
    ] = None,
    every: Annotated[
        Optional[int], typer.Option("--every", help="Repeat every N units")
    ] = None,
    unit: Annotated[
        Optional[str],
        typer.Option("--unit", parser=parse_unit, help="day, week, month or year"),
    ] = None,
    until: Annotated[
        Optional[pendulum.Date],
        typer.Option("--until", parser=parse_date, help="Last day a repetition may fall on"),
    ] = None,
    location: Annotated[Optional[str], typer.Option("--location", "-l")] = None,
    tag_ids: Annotated[
        Optional[list[str]],
        typer.Option("--tag-id", "-t", help="Tag id (accepts multiple)"),
    ] = None,
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Write the meetings as YAML for bulk insert"),
    ] = None,
) -> None:
    """
    Expand a new meeting and its recurrence into independent meetings.

    Without --every, --unit and --until only the meeting itself is produced.
    """
    console = Console()

    base = get_meeting_template(start)
    base["title"] = title
    if end is not None:
        base["end"] = end
    base["location"] = location
    base["tag_ids"] = tag_ids if tag_ids is not None else []

    rule: RecurrenceRule = {
        "interval_count": every,
        "unit": cast(Optional[RecurrenceUnit], unit),
        "end_date": until,
    }

    try:
        meetings = expand(base, rule)
    except (MeetingValidationError, RecurrenceValidationError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    meetings_report("meeting expand", meetings, f"{len(meetings)} meetings")

    if out is not None:
        save_meetings(out, meetings)
        console.print(f"[green]Wrote {len(meetings)} meetings to {out}[/green]")
