# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from tempora.model.meeting import Meeting
from tempora.service.grid import meeting_duration_minutes
from tempora.time import datetime_to_display_str
from tempora.view.views.header import header


def meetings_report(
    report_name: str,
    meetings: list[Meeting],
    sub_header: Optional[str] = None,
) -> None:
    header(report_name, sub_header)

    table = Table(box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("title")
    table.add_column("start")
    table.add_column("end")
    table.add_column("minutes", justify="right")

    for index, meeting in enumerate(meetings):
        table.add_row(
            str(index),
            meeting["title"],
            datetime_to_display_str(meeting["start"]),
            datetime_to_display_str(meeting["end"]) if meeting["end"] else "",
            str(meeting_duration_minutes(meeting)),
        )

    console = Console()
    console.print(table)
