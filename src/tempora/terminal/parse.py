# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from tempora.model.recurrence import RECURRENCE_UNITS, RecurrenceUnit
from tempora.state import get_now
from tempora.time import date_from_str, datetime_from_str


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    """
    Parse a calendar day: YYYY-MM-DD, today/t, yesterday/y, tomorrow/o, or a
    day offset from today like 1 or -1.
    """
    if date_param is None:
        return None

    value = str(date_param).strip()
    today = get_now().date()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", value):
        try:
            return date_from_str(value)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{value}': {e}")

    if re.match(r"^-?\d+$", value):
        return today.add(days=int(value))

    if value in ("today", "t"):
        return today
    if value in ("yesterday", "y"):
        return today.subtract(days=1)
    if value in ("tomorrow", "o"):
        return today.add(days=1)
    raise typer.BadParameter(
        f"Date must be YYYY-MM-DD, today, yesterday, tomorrow or a day offset, got '{value}'"
    )


def parse_datetime(datetime_param: Optional[str]) -> Optional[pendulum.DateTime]:
    """
    Parse a wall-clock timestamp: "YYYY-MM-DD HH:mm", "YYYY-MM-DDTHH:mm",
    a bare date (midnight), (H)H:mm on today's date, or now/n.
    """
    if datetime_param is None:
        return None

    value = str(datetime_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}", value):
        try:
            return datetime_from_str(value)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid datetime '{value}': {e}")

    time_match = re.match(r"^(\d{1,2}):(\d{2})$", value)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))

        if hour < 0 or hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute < 0 or minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

        return get_now().start_of("day").set(hour=hour, minute=minute)

    if value in ("now", "n"):
        return get_now()
    raise typer.BadParameter("Incorrect datetime format")


def parse_unit(unit_param: Optional[str]) -> Optional[RecurrenceUnit]:
    if unit_param is None:
        return None
    unit = unit_param.strip().lower().rstrip("s")
    if unit not in RECURRENCE_UNITS:
        raise typer.BadParameter(
            f"Unit must be one of {', '.join(RECURRENCE_UNITS)}, got '{unit_param}'"
        )
    return unit  # type: ignore[return-value]
