# SPDX-License-Identifier: MIT

from typing import Iterator

import pendulum
import pytest
import typer

from tempora.state import get_now, set_now
from tempora.terminal.parse import parse_date, parse_datetime, parse_unit


@pytest.fixture(autouse=True)
def fixed_now() -> Iterator[pendulum.DateTime]:
    now = pendulum.naive(2025, 3, 12, 11, 30)
    set_now(now)
    yield now
    set_now(None)


def test_injected_clock(fixed_now: pendulum.DateTime):
    assert get_now() == fixed_now


def test_parse_date():
    assert parse_date(None) is None
    assert parse_date("2025-01-31") == pendulum.date(2025, 1, 31)
    assert parse_date("today") == pendulum.date(2025, 3, 12)
    assert parse_date("y") == pendulum.date(2025, 3, 11)
    assert parse_date("-12") == pendulum.date(2025, 2, 28)
    with pytest.raises(typer.BadParameter):
        parse_date("2025-02-30")
    with pytest.raises(typer.BadParameter):
        parse_date("next week")


def test_parse_datetime():
    assert parse_datetime("2025-01-06 09:15") == pendulum.naive(2025, 1, 6, 9, 15)
    assert parse_datetime("2025-01-06") == pendulum.naive(2025, 1, 6)
    assert parse_datetime("8:45") == pendulum.naive(2025, 3, 12, 8, 45)
    assert parse_datetime("now") == pendulum.naive(2025, 3, 12, 11, 30)
    with pytest.raises(typer.BadParameter):
        parse_datetime("25:00")
    with pytest.raises(typer.BadParameter):
        parse_datetime("soon")


def test_parse_unit():
    assert parse_unit("Weeks") == "week"
    assert parse_unit("month") == "month"
    with pytest.raises(typer.BadParameter):
        parse_unit("hour")
