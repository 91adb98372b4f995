# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tempora.color import OVERDUE_COLOR
from tempora.model.accounting import AccountingSummary, YearReport
from tempora.service.dashboard import Dashboard
from tempora.service.time_entry import entry_minutes
from tempora.time import (
    datetime_to_display_str,
    hours_to_str,
    to_date,
)
from tempora.view.views.header import header


def _signed(hours: float) -> Text:
    style = "green" if hours >= 0 else OVERDUE_COLOR
    return Text(hours_to_str(hours), style=style)


def summary_report(period_label: str, summary: AccountingSummary) -> None:
    header("report summary", period_label)

    console = Console()
    table = Table(box=box.SIMPLE)
    table.add_column("figure", style="cyan")
    table.add_column("value", justify="right")

    table.add_row("credited", f"{summary['credited_hours']:.1f}h")
    table.add_row("expected", f"{summary['expected_hours']:.1f}h")
    table.add_row("overtime balance", _signed(summary["overtime_balance"]))
    table.add_row("vacation days used", f"{summary['vacation_days_used']:.1f}")
    table.add_row("vacation days remaining", f"{summary['vacation_days_remaining']:.1f}")
    table.add_row("this week", _signed(summary["weekly_balance"]))

    console.print(table)


def year_report_view(report: YearReport) -> None:
    """Yearly overview followed by the planned (future) vacation entries."""
    header("report year", str(report["year"]))

    console = Console()
    table = Table(box=box.SIMPLE)
    table.add_column("figure", style="cyan")
    table.add_column("value", justify="right")

    table.add_row("contract", f"{report['contract_hours_per_week']:g}h / week")
    table.add_row("hours per day", f"{report['hours_per_day']:.1f}h")
    table.add_row("worked", f"{report['worked_hours']:.1f}h")
    table.add_row("sick", f"{report['sick_hours']:.1f}h")
    table.add_row("vacation", f"{report['vacation_hours']:.1f}h")
    table.add_row("adjustments", hours_to_str(report["adjustment_hours"]))
    table.add_row("credited", f"{report['credited_hours']:.1f}h")
    table.add_row("expected", f"{report['expected_hours']:.1f}h")
    table.add_row("overtime balance", _signed(report["overtime_balance"]))
    table.add_row(
        "vacation days",
        f"{report['vacation']['days_used']:.1f} / {report['vacation']['allowance_days']:g}",
    )
    table.add_row("vacation days remaining", f"{report['vacation']['days_remaining']:.1f}")
    console.print(table)

    if not report["planned_vacation"]:
        return

    planned = Table(title="planned vacation", box=box.SIMPLE)
    planned.add_column("date")
    planned.add_column("hours", justify="right")
    planned.add_column("description")
    for entry in report["planned_vacation"]:
        planned.add_row(
            to_date(entry["date"]).to_date_string(),
            f"{entry_minutes(entry) / 60:.1f}",
            entry["description"] or "",
        )
    console.print(planned)


def dashboard_view(dashboard: Dashboard) -> None:
    header("report dashboard")

    console = Console()

    hours_today = dashboard["minutes_logged_today"] / 60
    console.print(f"\n[bold]Logged today:[/bold] {hours_today:.1f}h")
    console.print(
        f"[bold]Open actions:[/bold] {len(dashboard['pending_actions'])}"
        f"  [{OVERDUE_COLOR}]overdue: {len(dashboard['overdue_actions'])}[/{OVERDUE_COLOR}]\n"
    )

    if dashboard["overdue_actions"]:
        overdue = Table(title="overdue", box=box.SIMPLE)
        overdue.add_column("title")
        overdue.add_column("due")
        for action in dashboard["overdue_actions"]:
            overdue.add_row(
                action["title"],
                to_date(action["due_date"]).to_date_string() if action["due_date"] else "",
            )
        console.print(overdue)

    if dashboard["focus_actions"]:
        focus = Table(title="focus", box=box.SIMPLE)
        focus.add_column("title")
        focus.add_column("status")
        for action in dashboard["focus_actions"]:
            focus.add_row(action["title"], action["status"])
        console.print(focus)

    upcoming = Table(title="upcoming meetings", box=box.SIMPLE)
    upcoming.add_column("start")
    upcoming.add_column("title")
    upcoming.add_column("location")
    for meeting in dashboard["upcoming_meetings"]:
        upcoming.add_row(
            datetime_to_display_str(meeting["start"]),
            meeting["title"],
            meeting["location"] or "",
        )
    console.print(upcoming)
