# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

RecurrenceUnit = Literal["day", "week", "month", "year"]

RECURRENCE_UNITS: tuple[RecurrenceUnit, ...] = ("day", "week", "month", "year")


class RecurrenceRule(TypedDict):
    interval_count: Optional[int]
    unit: Optional[RecurrenceUnit]
    end_date: Optional[pendulum.Date]
