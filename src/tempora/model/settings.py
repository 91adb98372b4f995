# SPDX-License-Identifier: MIT

from typing import TypedDict

DEFAULT_CONTRACT_HOURS_PER_WEEK = 40.0
DEFAULT_VACATION_DAYS_PER_YEAR = 25.0


class Settings(TypedDict):
    contract_hours_per_week: float
    vacation_days_per_year: float
