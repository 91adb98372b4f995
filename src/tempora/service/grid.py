# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

import pendulum

from tempora.model.meeting import Meeting, MeetingGeometry
from tempora.time import DateLike, minutes_between, minutes_since_midnight, to_date

DEFAULT_DURATION_MINUTES = 60
MINIMUM_HEIGHT_MINUTES = 30
COMPACT_THRESHOLD_MINUTES = 45
MINUTES_PER_HOUR = 60
DEFAULT_PIXELS_PER_HOUR = 60


def meeting_duration_minutes(meeting: Meeting) -> int:
    """Length of the meeting in minutes, one hour when no end is recorded."""
    if meeting["end"] is None:
        return DEFAULT_DURATION_MINUTES
    return minutes_between(meeting["start"], meeting["end"])


def is_compact(duration_minutes: int) -> bool:
    """Short meetings render time and title on a single line."""
    return duration_minutes < COMPACT_THRESHOLD_MINUTES


def position(meeting: Meeting, day_window_start: int = 0) -> Optional[MeetingGeometry]:
    """
    Vertical geometry of a meeting on the day/week time grid.

    Offsets and heights are minute units measured from the top of the grid,
    which starts at ``day_window_start`` o'clock. Meetings that start before
    the grid window are not positioned.
    """
    top_offset = minutes_since_midnight(meeting["start"]) - day_window_start * MINUTES_PER_HOUR
    if top_offset < 0:
        return None

    duration_minutes = meeting_duration_minutes(meeting)
    return {
        "top_offset": top_offset,
        "height": max(MINIMUM_HEIGHT_MINUTES, duration_minutes),
        "duration_minutes": duration_minutes,
        "compact": is_compact(duration_minutes),
    }


def to_pixels(units: int, pixels_per_hour: int = DEFAULT_PIXELS_PER_HOUR) -> float:
    return units * pixels_per_hour / MINUTES_PER_HOUR


def now_indicator(
    day: DateLike, now: pendulum.DateTime, day_window_start: int = 0
) -> Optional[int]:
    """Offset of the current-time line, only for the column showing today."""
    if to_date(day) != now.date():
        return None
    offset = minutes_since_midnight(now) - day_window_start * MINUTES_PER_HOUR
    if offset < 0:
        return None
    return offset


def slot_timestamp(day: DateLike, hour: int) -> pendulum.DateTime:
    """Start of the empty grid slot at the given hour, used to prefill creation."""
    if not 0 <= hour <= 23:
        raise ValueError(f"hour must be between 0 and 23, got {hour}")
    date = to_date(day)
    return pendulum.naive(date.year, date.month, date.day, hour)


def meetings_for_day(meetings: Iterable[Meeting], day: DateLike) -> list[Meeting]:
    """Meetings starting on the given day, ordered by start time."""
    date = to_date(day)
    day_meetings = [meeting for meeting in meetings if meeting["start"].date() == date]
    day_meetings.sort(key=lambda meeting: meeting["start"])
    return day_meetings


def meetings_by_day(
    meetings: Iterable[Meeting], days: Iterable[DateLike]
) -> dict[pendulum.Date, list[Meeting]]:
    """Group meetings under each rendered day (month and year list views)."""
    grouped: dict[pendulum.Date, list[Meeting]] = {to_date(day): [] for day in days}
    for meeting in meetings:
        start_day = meeting["start"].date()
        if start_day in grouped:
            grouped[start_day].append(meeting)
    for day_meetings in grouped.values():
        day_meetings.sort(key=lambda meeting: meeting["start"])
    return grouped
