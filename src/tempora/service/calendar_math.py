# SPDX-License-Identifier: MIT

from typing import Iterator, Literal, Optional, TypeVar

import pendulum

from tempora.model.recurrence import RecurrenceUnit
from tempora.time import DateLike, to_date

ViewGranularity = Literal["day", "week", "month", "year"]

VIEW_GRANULARITIES: tuple[ViewGranularity, ...] = ("day", "week", "month", "year")

_Moment = TypeVar("_Moment", pendulum.Date, pendulum.DateTime)


def get_period_boundaries(
    granularity: ViewGranularity,
    reference: DateLike,
) -> tuple[pendulum.Date, pendulum.Date]:
    """
    Get the first and last day (both inclusive) of the period containing
    the reference date. Weeks run Monday to Sunday.
    """
    date = to_date(reference)

    if granularity == "day":
        return date, date
    elif granularity == "week":
        return date.start_of("week"), date.end_of("week")
    elif granularity == "month":
        return date.start_of("month"), date.end_of("month")
    elif granularity == "year":
        return date.start_of("year"), date.end_of("year")
    raise ValueError(f"unknown granularity: {granularity}")


def each_day(start: DateLike, end: DateLike) -> Iterator[pendulum.Date]:
    """Yield every day from start to end, both inclusive."""
    current = to_date(start)
    last = to_date(end)
    while current <= last:
        yield current
        current = current.add(days=1)


def view_days(granularity: ViewGranularity, reference: DateLike) -> list[pendulum.Date]:
    """
    Days rendered by a calendar view around the reference date.

    - day: the reference day
    - week: Monday to Sunday of the reference week
    - month: full weeks covering the month, so the grid starts on a Monday
      and ends on a Sunday
    - year: every day of the year
    """
    date = to_date(reference)

    if granularity == "month":
        start = date.start_of("month").start_of("week")
        end = date.end_of("month").end_of("week")
    else:
        start, end = get_period_boundaries(granularity, date)
    return list(each_day(start, end))


def view_months(reference: DateLike) -> list[pendulum.Date]:
    """First day of each month of the reference year, used by the year view."""
    year = to_date(reference).year
    return [pendulum.date(year, month, 1) for month in range(1, 13)]


def shift_view(
    reference: DateLike, granularity: ViewGranularity, steps: int
) -> pendulum.Date:
    """Move the reference date by whole view periods (negative steps go back)."""
    date = to_date(reference)
    if granularity == "day":
        return date.add(days=steps)
    elif granularity == "week":
        return date.add(weeks=steps)
    elif granularity == "month":
        return date.add(months=steps)
    elif granularity == "year":
        return date.add(years=steps)
    raise ValueError(f"unknown granularity: {granularity}")


def is_weekend(date: DateLike) -> bool:
    return to_date(date).isoweekday() >= 6


def is_business_day(date: DateLike) -> bool:
    """Monday to Friday. Holidays are not modeled."""
    return not is_weekend(date)


def count_business_days(start: DateLike, end: DateLike) -> int:
    """Number of business days between start and end, both inclusive."""
    first = to_date(start)
    last = to_date(end)
    if last < first:
        return 0

    total_days = last.toordinal() - first.toordinal() + 1
    full_weeks, remainder = divmod(total_days, 7)
    business_days = full_weeks * 5

    # Remaining days start on the same weekday as the first day
    weekday = first.isoweekday()
    for offset in range(remainder):
        if (weekday - 1 + offset) % 7 < 5:
            business_days += 1

    return business_days


def is_same_day(first: Optional[DateLike], second: Optional[DateLike]) -> bool:
    """Compare two date values at day granularity. Missing values never match."""
    if first is None or second is None:
        return False
    return to_date(first) == to_date(second)


def add_units(value: _Moment, count: int, unit: RecurrenceUnit) -> _Moment:
    """
    Calendar-field arithmetic. Months and years clamp to the last day of the
    target month, so Jan 31 + 1 month is Feb 28 (or 29).
    """
    if unit == "day":
        return value.add(days=count)
    elif unit == "week":
        return value.add(days=count * 7)
    elif unit == "month":
        return value.add(months=count)
    elif unit == "year":
        return value.add(years=count)
    raise ValueError(f"unknown unit: {unit}")
