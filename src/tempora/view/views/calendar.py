# SPDX-License-Identifier: MIT

from typing import Mapping

import pendulum
from rich import box
from rich.columns import Columns
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tempora.color import NOW_INDICATOR_COLOR, OVERDUE_COLOR, WEEKEND_COLOR
from tempora.model.action import Action
from tempora.model.entity_id import EntityId
from tempora.model.meeting import Meeting
from tempora.model.tag import Tag
from tempora.service.calendar_math import (
    ViewGranularity,
    get_period_boundaries,
    is_weekend,
    view_days,
    view_months,
)
from tempora.service.day_classifier import is_overdue, is_terminal, placement_map
from tempora.service.grid import (
    meetings_by_day,
    now_indicator,
    position,
    to_pixels,
)
from tempora.service.style import resolve_color
from tempora.time import date_to_display_str, datetime_to_display_time_str
from tempora.view.views.header import header

MONTH_CELL_ITEMS = 3


def action_state(action: Action) -> str:
    if action["status"] == "Done":
        return "X"
    elif action["status"] == "Archived":
        return "/"
    elif action["status"] == "Doing":
        return ">"
    elif action["status"] == "Waiting":
        return "~"
    return " "


def _action_line(
    action: Action, tags_by_id: Mapping[EntityId, Tag], today: pendulum.Date
) -> Text:
    color = resolve_color(action, tags_by_id)
    line = Text()
    line.append(f"[{action_state(action)}] ", style=color)
    line.append(action["title"] or "[no title]", style="dim" if is_terminal(action) else color)
    if action["is_focus"]:
        line.append(" *", style="bold")
    if is_overdue(action, today):
        line.append(" (overdue)", style=OVERDUE_COLOR)
    return line


def _meeting_time_range(meeting: Meeting) -> str:
    start = datetime_to_display_time_str(meeting["start"])
    if meeting["end"] is None:
        return start
    return f"{start}-{datetime_to_display_time_str(meeting['end'])}"


def _day_table(
    day: pendulum.Date,
    actions: list[Action],
    meetings: list[Meeting],
    tags_by_id: Mapping[EntityId, Tag],
    now: pendulum.DateTime,
    pixels_per_hour: int,
    day_window_start: int,
) -> Table:
    """One day column of the time grid: placed actions, then meeting geometry."""
    title_style = WEEKEND_COLOR if is_weekend(day) else "bold"
    table = Table(
        title=date_to_display_str(day),
        title_style=title_style,
        box=box.SIMPLE,
        expand=False,
    )
    table.add_column("time")
    table.add_column("item")
    table.add_column("top", justify="right")
    table.add_column("height", justify="right")

    for action in actions:
        table.add_row("", _action_line(action, tags_by_id, now.date()), "", "")

    indicator = now_indicator(day, now, day_window_start)
    indicator_shown = indicator is None

    for meeting in meetings:
        geometry = position(meeting, day_window_start)

        if not indicator_shown and geometry is not None and indicator is not None:
            if indicator <= geometry["top_offset"]:
                table.add_row(
                    Text(datetime_to_display_time_str(now), style=NOW_INDICATOR_COLOR),
                    Text("now", style=NOW_INDICATOR_COLOR),
                    f"{to_pixels(indicator, pixels_per_hour):g}",
                    "",
                )
                indicator_shown = True

        color = resolve_color(meeting, tags_by_id)
        title = Text(meeting["title"] or "[no title]", style=color)
        if geometry is None:
            title.append(" (before window)", style="dim")
            table.add_row(_meeting_time_range(meeting), title, "", "")
            continue
        if geometry["compact"]:
            title.append(" (compact)", style="dim")
        table.add_row(
            _meeting_time_range(meeting),
            title,
            f"{to_pixels(geometry['top_offset'], pixels_per_hour):g}",
            f"{to_pixels(geometry['height'], pixels_per_hour):g}",
        )

    if not indicator_shown and indicator is not None:
        table.add_row(
            Text(datetime_to_display_time_str(now), style=NOW_INDICATOR_COLOR),
            Text("now", style=NOW_INDICATOR_COLOR),
            f"{to_pixels(indicator, pixels_per_hour):g}",
            "",
        )

    return table


def calendar_grid_view(
    granularity: ViewGranularity,
    reference: pendulum.Date,
    actions: list[Action],
    meetings: list[Meeting],
    tags_by_id: Mapping[EntityId, Tag],
    now: pendulum.DateTime,
    pixels_per_hour: int = 60,
    day_window_start: int = 0,
) -> None:
    """
    Display the day or week time grid.

    Meetings are listed with their vertical offset and height in pixels, the
    same geometry a graphical grid would use. Actions are listed above the
    meetings of the day they are placed on.
    """
    start, end = get_period_boundaries(granularity, reference)
    header(f"calendar {granularity}", f"{start.to_date_string()} - {end.to_date_string()}")

    console = Console()
    days = view_days(granularity, reference)
    placements = placement_map(actions, days, now.date())
    day_meetings = meetings_by_day(meetings, days)

    for day in days:
        console.print(
            _day_table(
                day,
                placements[day],
                day_meetings[day],
                tags_by_id,
                now,
                pixels_per_hour,
                day_window_start,
            )
        )


def _month_cell(
    day: pendulum.Date,
    month: int,
    actions: list[Action],
    meetings: list[Meeting],
    tags_by_id: Mapping[EntityId, Tag],
    today: pendulum.Date,
) -> Text:
    cell = Text()
    if day == today:
        cell.append(f"{day.day:2d}\n", style="bold black on bright_cyan")
    elif day.month != month:
        cell.append(f"{day.day:2d}\n", style="dim")
    elif is_weekend(day):
        cell.append(f"{day.day:2d}\n", style=f"bold {WEEKEND_COLOR}")
    else:
        cell.append(f"{day.day:2d}\n", style="bold")

    # Month cells have a fixed height, extra items are summarized
    items: list[Text] = []
    for meeting in meetings:
        line = Text(f"{datetime_to_display_time_str(meeting['start'])} ", style="dim")
        line.append(meeting["title"], style=resolve_color(meeting, tags_by_id))
        items.append(line)
    for action in actions:
        items.append(_action_line(action, tags_by_id, today))

    for item in items[:MONTH_CELL_ITEMS]:
        cell.append_text(item)
        cell.append("\n")
    if len(items) > MONTH_CELL_ITEMS:
        cell.append(f"+{len(items) - MONTH_CELL_ITEMS} more\n", style="dim")
    return cell


def calendar_month_view(
    reference: pendulum.Date,
    actions: list[Action],
    meetings: list[Meeting],
    tags_by_id: Mapping[EntityId, Tag],
    now: pendulum.DateTime,
    cell_width: int = 20,
) -> None:
    header("calendar month", reference.format("MMMM YYYY"))

    console = Console()
    today = now.date()
    days = view_days("month", reference)
    placements = placement_map(actions, days, today)
    day_meetings = meetings_by_day(meetings, days)

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]:
        table.add_column(day_name, width=cell_width)

    for week_start in range(0, len(days), 7):
        week = days[week_start : week_start + 7]
        table.add_row(
            *[
                _month_cell(
                    day,
                    reference.month,
                    placements[day],
                    day_meetings[day],
                    tags_by_id,
                    today,
                )
                for day in week
            ]
        )

    console.print(table)


def calendar_year_view(
    reference: pendulum.Date,
    actions: list[Action],
    meetings: list[Meeting],
    tags_by_id: Mapping[EntityId, Tag],
    now: pendulum.DateTime,
) -> None:
    """Display one panel per month listing the days that carry items."""
    header("calendar year", str(reference.year))

    console = Console()
    today = now.date()
    days = view_days("year", reference)
    placements = placement_map(actions, days, today)
    day_meetings = meetings_by_day(meetings, days)

    month_panels: list[RenderableType] = []
    for month_start in view_months(reference):
        lines = Text()
        for day in days:
            if day.month != month_start.month:
                continue
            action_count = len(placements[day])
            meeting_count = len(day_meetings[day])
            if action_count == 0 and meeting_count == 0:
                continue
            style = "bold black on bright_cyan" if day == today else ""
            lines.append(f"{day.day:2d}", style=style)
            lines.append(f"  {meeting_count}m {action_count}a\n")

        month_panels.append(
            Panel(
                lines if lines.plain else Text("-", style="dim"),
                title=month_start.format("MMMM"),
                border_style="bright_black",
                padding=(0, 1),
                width=22,
            )
        )

    console.print(Columns(month_panels, equal=False, expand=False, padding=(0, 2)))
