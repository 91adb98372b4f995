# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from tempora.model.time_entry import TimeEntry


class DateRange(TypedDict):
    start: pendulum.Date
    end: pendulum.Date


class AccountingSummary(TypedDict):
    credited_hours: float
    expected_hours: float
    overtime_balance: float
    vacation_days_used: float
    vacation_days_remaining: float
    weekly_balance: float


class Balance(TypedDict):
    start: pendulum.Date
    calculation_end: pendulum.Date
    credited_minutes: int
    expected_hours: float
    balance_hours: float


class VacationBalance(TypedDict):
    allowance_days: float
    minutes: int
    days_used: float
    days_remaining: float


class YearReport(TypedDict):
    year: int
    hours_per_day: float
    contract_hours_per_week: float
    worked_hours: float
    sick_hours: float
    vacation_hours: float
    adjustment_hours: float
    credited_hours: float
    expected_hours: float
    overtime_balance: float
    vacation: VacationBalance
    planned_vacation: list[TimeEntry]
