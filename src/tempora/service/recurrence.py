# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

import pendulum

from tempora.model.meeting import Meeting
from tempora.model.recurrence import RECURRENCE_UNITS, RecurrenceRule
from tempora.service.calendar_math import add_units
from tempora.service.meeting import validate_meeting
from tempora.time import to_date

logger = logging.getLogger(__name__)

# Generated instances, not counting the base meeting
MAX_INSTANCES = 365


class RecurrenceValidationError(Exception):
    """Raised when a fully specified recurrence rule has invalid values."""

    pass


def is_complete(rule: Optional[RecurrenceRule]) -> bool:
    """A rule only recurs when unit, interval and end date are all set."""
    return (
        rule is not None
        and rule["unit"] is not None
        and rule["interval_count"] is not None
        and rule["end_date"] is not None
    )


def validate_rule(rule: RecurrenceRule) -> RecurrenceRule:
    if rule["unit"] not in RECURRENCE_UNITS:
        raise RecurrenceValidationError(
            f"Recurrence unit must be one of {', '.join(RECURRENCE_UNITS)}, got {rule['unit']!r}"
        )
    if rule["interval_count"] is None or rule["interval_count"] < 1:
        raise RecurrenceValidationError(
            f"Recurrence interval must be at least 1, got {rule['interval_count']}"
        )
    return rule


def end_boundary(rule: RecurrenceRule, start: pendulum.DateTime) -> pendulum.DateTime:
    """Last moment of the rule's end date, making the end date inclusive."""
    end_date = to_date(rule["end_date"])  # type: ignore[arg-type]
    return start.on(end_date.year, end_date.month, end_date.day).end_of("day")


def expand(
    base: Meeting,
    rule: Optional[RecurrenceRule],
    max_instances: int = MAX_INSTANCES,
) -> list[Meeting]:
    """
    Expand a new meeting and its recurrence rule into independent meetings.

    The base meeting is always element 0. Each generated instance is a copy of
    the base with a shifted start and end; it has no id and no link back to the
    rule. Instances are placed at base + k * interval so that a month series
    starting on the 31st returns to the 31st whenever the month allows it.

    An incomplete rule produces only the base meeting.
    """
    validate_meeting(base)

    if not is_complete(rule):
        return [deepcopy(base)]
    assert rule is not None
    validate_rule(rule)

    start = base["start"]
    duration_seconds = (
        int((base["end"] - start).total_seconds()) if base["end"] is not None else None
    )
    boundary = end_boundary(rule, start)
    interval = rule["interval_count"]
    unit = rule["unit"]
    assert interval is not None and unit is not None

    meetings = [deepcopy(base)]
    step = 1
    while len(meetings) - 1 < max_instances:
        cursor = add_units(start, interval * step, unit)
        if cursor > boundary:
            break

        instance = deepcopy(base)
        instance["id"] = None
        instance["start"] = cursor
        instance["end"] = (
            cursor.add(seconds=duration_seconds) if duration_seconds is not None else None
        )
        meetings.append(instance)
        step += 1

    logger.debug(
        "Expanded '%s' every %d %s until %s into %d meetings",
        base["title"],
        interval,
        unit,
        boundary.to_date_string(),
        len(meetings),
    )
    return meetings
