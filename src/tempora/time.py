# SPDX-License-Identifier: MIT

import re
from typing import Optional, Union, cast

import pendulum

DateLike = Union[pendulum.Date, pendulum.DateTime, str]

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def now_local() -> pendulum.DateTime:
    """Current wall-clock time as a naive local value."""
    now = pendulum.now("local")
    return pendulum.naive(
        now.year, now.month, now.day, now.hour, now.minute, now.second, now.microsecond
    )


def naive(value: pendulum.DateTime) -> pendulum.DateTime:
    """Drop timezone information, keeping the wall-clock fields."""
    return pendulum.naive(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond,
    )


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    """Parse an ISO date or datetime string to a naive wall-clock DateTime.

    A bare date resolves to local midnight. Any offset carried by the string is
    ignored: stored values are wall-clock times.
    """
    parsed = pendulum.parse(datetime, exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return naive(parsed)
    if isinstance(parsed, pendulum.Date):
        return pendulum.naive(parsed.year, parsed.month, parsed.day)
    raise ValueError(f"not a date or datetime: {datetime!r}")


def date_from_str(date_str: str) -> pendulum.Date:
    parsed = pendulum.parse(date_str, exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    if isinstance(parsed, pendulum.Date):
        return parsed
    raise ValueError(f"not a date: {date_str!r}")


def to_date(value: DateLike) -> pendulum.Date:
    """Strip the time of day from any supported date value.

    Raises ValueError when a string value cannot be parsed.
    """
    if isinstance(value, str):
        return date_from_str(value)
    if isinstance(value, pendulum.DateTime):
        return value.date()
    return pendulum.date(value.year, value.month, value.day)


def to_date_optional(value: Optional[DateLike]) -> Optional[pendulum.Date]:
    if value is None:
        return None
    return to_date(value)


def time_from_str(time_str: str) -> pendulum.Time:
    """Parse a (H)H:mm or HH:mm:ss string to a pendulum.Time."""
    time_match = _TIME_PATTERN.match(time_str.strip())
    if not time_match:
        raise ValueError(f"time must be in HH:mm format, got {time_str!r}")
    hour = int(time_match.group(1))
    minute = int(time_match.group(2))
    second = int(time_match.group(3) or 0)
    if hour > 23 or minute > 59 or second > 59:
        raise ValueError(f"time out of range: {time_str!r}")
    return pendulum.time(hour, minute, second)


def minutes_since_midnight(datetime: pendulum.DateTime) -> int:
    return datetime.hour * 60 + datetime.minute


def minutes_between(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    return int((end - start).total_seconds() // 60)


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return cast(str, datetime.isoformat())


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def datetime_to_display_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("HH:mm")


def datetime_to_display_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("MMM-DD ddd HH:mm")


def hours_to_str(hours: float) -> str:
    sign = "+" if hours > 0 else ""
    return f"{sign}{hours:.1f}h"
