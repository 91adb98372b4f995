# SPDX-License-Identifier: MIT

import logging
from collections import defaultdict
from typing import Iterable, Optional, Union

import pendulum

from tempora.model.accounting import (
    AccountingSummary,
    Balance,
    DateRange,
    VacationBalance,
    YearReport,
)
from tempora.model.settings import (
    DEFAULT_CONTRACT_HOURS_PER_WEEK,
    DEFAULT_VACATION_DAYS_PER_YEAR,
    Settings,
)
from tempora.model.time_entry import TimeEntry
from tempora.service.calendar_math import count_business_days, get_period_boundaries
from tempora.service.time_entry import entry_minutes, entry_type
from tempora.time import DateLike, to_date

logger = logging.getLogger(__name__)

WORK_DAYS_PER_WEEK = 5
MINUTES_PER_HOUR = 60

Period = Union[int, DateRange]

DatedEntry = tuple[pendulum.Date, TimeEntry]


def resolve_settings(settings: Optional[Settings]) -> Settings:
    """Fill in the contract defaults (40h week, 25 vacation days) where unset."""
    if settings is None:
        return {
            "contract_hours_per_week": DEFAULT_CONTRACT_HOURS_PER_WEEK,
            "vacation_days_per_year": DEFAULT_VACATION_DAYS_PER_YEAR,
        }
    contract_hours = settings.get("contract_hours_per_week")
    vacation_days = settings.get("vacation_days_per_year")
    return {
        "contract_hours_per_week": (
            DEFAULT_CONTRACT_HOURS_PER_WEEK if contract_hours is None else contract_hours
        ),
        "vacation_days_per_year": (
            DEFAULT_VACATION_DAYS_PER_YEAR if vacation_days is None else vacation_days
        ),
    }


def hours_per_day(settings: Optional[Settings]) -> float:
    return resolve_settings(settings)["contract_hours_per_week"] / WORK_DAYS_PER_WEEK


def minutes_to_days(minutes: int, settings: Optional[Settings]) -> float:
    """Convert minutes to standard work days; 0 when the contract has no hours."""
    day_length = hours_per_day(settings)
    if day_length == 0:
        return 0.0
    return minutes / MINUTES_PER_HOUR / day_length


def date_entries(entries: Iterable[TimeEntry]) -> list[DatedEntry]:
    """
    Pair every entry with its calendar day. Entries whose date cannot be
    parsed are left out of every calculation.
    """
    dated: list[DatedEntry] = []
    for entry in entries:
        try:
            dated.append((to_date(entry["date"]), entry))
        except (ValueError, TypeError) as e:
            logger.warning(
                "Skipping time entry %s with unparsable date %r: %s",
                entry.get("id"),
                entry.get("date"),
                e,
            )
    return dated


def expected_hours(
    start: DateLike, end: DateLike, settings: Optional[Settings]
) -> float:
    """Contractual hours for the business days between start and end."""
    return count_business_days(start, end) * hours_per_day(settings)


def credited_minutes(
    entries: Iterable[TimeEntry], start: DateLike, end: DateLike
) -> int:
    """Work minutes recorded between start and end, both inclusive."""
    first = to_date(start)
    last = to_date(end)
    return sum(
        entry_minutes(entry)
        for day, entry in date_entries(entries)
        if first <= day <= last and entry_type(entry) == "work"
    )


def _balance(
    dated: list[DatedEntry],
    settings: Optional[Settings],
    start: pendulum.Date,
    period_end: pendulum.Date,
    today: pendulum.Date,
) -> Balance:
    """
    Credited against expected hours for a period, counted up to today.

    Balance adjustments inside the period always count. Every other entry only
    counts once its day is no longer in the future. A period that has not
    started yet expects nothing.
    """
    if today < start:
        calculation_end = start
        expected = 0.0
    else:
        calculation_end = min(today, period_end)
        expected = expected_hours(start, calculation_end, settings)

    minutes = 0
    for day, entry in dated:
        if not start <= day <= period_end:
            continue
        if entry_type(entry) == "balance" or day <= today:
            minutes += entry_minutes(entry)

    return {
        "start": start,
        "calculation_end": calculation_end,
        "credited_minutes": minutes,
        "expected_hours": expected,
        "balance_hours": minutes / MINUTES_PER_HOUR - expected,
    }


def year_to_date(
    entries: Iterable[TimeEntry],
    settings: Optional[Settings],
    year: int,
    today: DateLike,
) -> Balance:
    """Overtime balance of a calendar year, counted up to today."""
    start, end = get_period_boundaries("year", pendulum.date(year, 1, 1))
    return _balance(date_entries(entries), settings, start, end, to_date(today))


def week_balance(
    entries: Iterable[TimeEntry],
    settings: Optional[Settings],
    today: DateLike,
) -> Balance:
    """Overtime balance of the Monday to Sunday week containing today."""
    current_day = to_date(today)
    start, end = get_period_boundaries("week", current_day)
    return _balance(date_entries(entries), settings, start, end, current_day)


def vacation_balance(
    entries: Iterable[TimeEntry],
    settings: Optional[Settings],
    year: int,
) -> VacationBalance:
    """
    Vacation used and left for a year. Planned (future) vacation counts too;
    negative minutes are bought days and add to what is left.
    """
    resolved = resolve_settings(settings)
    minutes = sum(
        entry_minutes(entry)
        for day, entry in date_entries(entries)
        if day.year == year and entry_type(entry) == "vacation"
    )
    days_used = minutes_to_days(minutes, resolved)
    return {
        "allowance_days": resolved["vacation_days_per_year"],
        "minutes": minutes,
        "days_used": days_used,
        "days_remaining": resolved["vacation_days_per_year"] - days_used,
    }


def period_vacation_days(
    entries: Iterable[TimeEntry],
    settings: Optional[Settings],
    date_range: DateRange,
) -> float:
    """Vacation days taken inside a date range."""
    first = to_date(date_range["start"])
    last = to_date(date_range["end"])
    minutes = sum(
        entry_minutes(entry)
        for day, entry in date_entries(entries)
        if first <= day <= last and entry_type(entry) == "vacation"
    )
    return minutes_to_days(minutes, settings)


def summarize(
    entries: Iterable[TimeEntry],
    settings: Optional[Settings],
    period: Period,
    today: DateLike,
) -> AccountingSummary:
    """
    Compute the time accounting figures for a year or a date range.

    - year: credited and expected hours year-to-date, overtime balance
    - date range: work hours in the range against the range's contract hours
    Vacation is always reported for the whole year (of the range start) and
    the weekly balance always covers the week containing today.
    """
    entries = list(entries)
    current_day = to_date(today)

    if isinstance(period, int):
        year = period
        ytd = year_to_date(entries, settings, year, current_day)
        credited_hours = ytd["credited_minutes"] / MINUTES_PER_HOUR
        expected = ytd["expected_hours"]
    else:
        start = to_date(period["start"])
        end = to_date(period["end"])
        year = start.year
        credited_hours = credited_minutes(entries, start, end) / MINUTES_PER_HOUR
        expected = expected_hours(start, end, settings)

    vacation = vacation_balance(entries, settings, year)
    week = week_balance(entries, settings, current_day)

    return {
        "credited_hours": credited_hours,
        "expected_hours": expected,
        "overtime_balance": credited_hours - expected,
        "vacation_days_used": vacation["days_used"],
        "vacation_days_remaining": vacation["days_remaining"],
        "weekly_balance": week["balance_hours"],
    }


def _type_minutes(
    dated: list[DatedEntry], year: int, type_name: str, until: Optional[pendulum.Date]
) -> int:
    return sum(
        entry_minutes(entry)
        for day, entry in dated
        if day.year == year
        and entry_type(entry) == type_name
        and (until is None or day <= until)
    )


def year_report(
    entries: Iterable[TimeEntry],
    settings: Optional[Settings],
    year: int,
    today: DateLike,
) -> YearReport:
    """Yearly overview: credited hours by type, overtime and vacation planning."""
    entries = list(entries)
    current_day = to_date(today)
    resolved = resolve_settings(settings)
    dated = date_entries(entries)
    ytd = year_to_date(entries, resolved, year, current_day)

    planned_vacation = sorted(
        (
            (day, entry)
            for day, entry in dated
            if day.year == year
            and entry_type(entry) == "vacation"
            and day > current_day
        ),
        key=lambda dated_entry: dated_entry[0],
    )

    return {
        "year": year,
        "hours_per_day": hours_per_day(resolved),
        "contract_hours_per_week": resolved["contract_hours_per_week"],
        "worked_hours": _type_minutes(dated, year, "work", current_day) / MINUTES_PER_HOUR,
        "sick_hours": _type_minutes(dated, year, "sick", current_day) / MINUTES_PER_HOUR,
        "vacation_hours": _type_minutes(dated, year, "vacation", current_day)
        / MINUTES_PER_HOUR,
        "adjustment_hours": _type_minutes(dated, year, "balance", None) / MINUTES_PER_HOUR,
        "credited_hours": ytd["credited_minutes"] / MINUTES_PER_HOUR,
        "expected_hours": ytd["expected_hours"],
        "overtime_balance": ytd["balance_hours"],
        "vacation": vacation_balance(entries, resolved, year),
        "planned_vacation": [entry for _, entry in planned_vacation],
    }


def group_by_date(entries: Iterable[TimeEntry]) -> list[tuple[pendulum.Date, list[TimeEntry]]]:
    """Entries grouped per day, most recent day first."""
    grouped: dict[pendulum.Date, list[TimeEntry]] = defaultdict(list)
    for day, entry in date_entries(entries):
        grouped[day].append(entry)
    return sorted(grouped.items(), key=lambda item: item[0], reverse=True)
