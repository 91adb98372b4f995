# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from tempora.model.time_entry import (
    EntryDuration,
    ManualDuration,
    TimedDuration,
    TimeEntry,
    TimeEntryType,
)

MINUTES_PER_DAY = 24 * 60

# Only these types may carry negative minutes (bought vacation, corrections)
NEGATIVE_MINUTES_ALLOWED: frozenset[str] = frozenset({"vacation", "balance"})


class TimeEntryValidationError(Exception):
    """Raised when a time entry's duration is inconsistent."""

    pass


def timed_duration(
    start: pendulum.Time, end: pendulum.Time, break_minutes: int = 0
) -> TimedDuration:
    return {
        "kind": "timed",
        "start": start,
        "end": end,
        "break_minutes": break_minutes,
    }


def manual_duration(minutes: int) -> ManualDuration:
    return {"kind": "manual", "minutes": minutes}


def timed_minutes(duration: TimedDuration) -> int:
    """
    Worked minutes of a start/end span minus its break, never negative.
    An end before the start is read as a span crossing midnight.
    """
    start = duration["start"].hour * 60 + duration["start"].minute
    end = duration["end"].hour * 60 + duration["end"].minute
    span = end - start
    if span < 0:
        span += MINUTES_PER_DAY
    return max(0, span - duration["break_minutes"])


def duration_minutes(duration: EntryDuration) -> int:
    """
    Minutes credited by a duration. Timed durations are always derived from
    start, end and break; manual durations are authoritative as stored.
    """
    if duration["kind"] == "timed":
        return timed_minutes(duration)
    return duration["minutes"]


def entry_minutes(entry: TimeEntry) -> int:
    return duration_minutes(entry["duration"])


def entry_type(entry: TimeEntry) -> TimeEntryType:
    """Entries recorded before types existed count as work."""
    return entry["type"] or "work"


def break_minutes(entry: TimeEntry) -> int:
    duration = entry["duration"]
    if duration["kind"] == "timed":
        return duration["break_minutes"]
    return 0


def validate_time_entry(entry: TimeEntry) -> TimeEntry:
    duration = entry["duration"]
    if duration["kind"] == "timed":
        if duration["break_minutes"] < 0:
            raise TimeEntryValidationError(
                f"Break must not be negative, got {duration['break_minutes']}"
            )
    elif duration["minutes"] < 0 and entry_type(entry) not in NEGATIVE_MINUTES_ALLOWED:
        raise TimeEntryValidationError(
            f"Only vacation and balance entries may have negative minutes, "
            f"got {duration['minutes']} for a {entry_type(entry)} entry"
        )
    return entry


def parse_duration(
    minutes: Optional[int],
    start: Optional[pendulum.Time],
    end: Optional[pendulum.Time],
    break_minutes: Optional[int],
) -> EntryDuration:
    """
    Build the duration variant from stored fields. A complete start/end pair
    wins over a stored minute count, which it would only duplicate.
    """
    if start is not None and end is not None:
        return timed_duration(start, end, break_minutes or 0)
    return manual_duration(minutes or 0)
