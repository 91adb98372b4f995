# SPDX-License-Identifier: MIT

import pendulum

from conftest import make_action
from tempora.service.day_classifier import (
    is_overdue,
    is_placed_on,
    placement_day,
    placement_map,
)


def test_terminal_action_stays_on_last_update():
    action = make_action(
        status="Done",
        due_date=pendulum.naive(2024, 1, 5),
        created_at=pendulum.naive(2024, 1, 1, 8),
        updated_at=pendulum.naive(2024, 1, 10, 14),
    )
    assert placement_day(action, pendulum.date(2024, 2, 1)) == pendulum.date(2024, 1, 10)


def test_archived_action_without_update_uses_creation():
    action = make_action(status="Archived", created_at=pendulum.naive(2024, 1, 3, 8))
    assert placement_day(action, pendulum.date(2024, 2, 1)) == pendulum.date(2024, 1, 3)


def test_future_start_is_shown_on_start():
    action = make_action(start_date=pendulum.naive(2024, 3, 10))
    assert placement_day(action, pendulum.date(2024, 3, 1)) == pendulum.date(2024, 3, 10)


def test_overdue_action_is_shown_on_due_day():
    action = make_action(
        start_date=pendulum.naive(2024, 2, 1), due_date=pendulum.naive(2024, 2, 20)
    )
    today = pendulum.date(2024, 3, 1)
    assert placement_day(action, today) == pendulum.date(2024, 2, 20)
    assert is_overdue(action, today)


def test_action_in_progress_moves_with_today():
    action = make_action(
        start_date=pendulum.naive(2024, 2, 1), due_date=pendulum.naive(2024, 3, 20)
    )
    assert placement_day(action, pendulum.date(2024, 3, 1)) == pendulum.date(2024, 3, 1)
    assert not is_overdue(action, pendulum.date(2024, 3, 1))


def test_due_today_is_not_overdue():
    action = make_action(due_date=pendulum.naive(2024, 3, 1, 17))
    assert placement_day(action, pendulum.date(2024, 3, 1)) == pendulum.date(2024, 3, 1)
    assert not is_overdue(action, pendulum.date(2024, 3, 1))


def test_start_falls_back_to_creation_then_today():
    created = make_action(created_at=pendulum.naive(2024, 4, 2, 9))
    assert placement_day(created, pendulum.date(2024, 4, 1)) == pendulum.date(2024, 4, 2)
    assert placement_day(make_action(), pendulum.date(2024, 4, 1)) == pendulum.date(2024, 4, 1)


def test_done_action_is_never_overdue():
    action = make_action(status="Done", due_date=pendulum.naive(2024, 1, 1))
    assert not is_overdue(action, pendulum.date(2024, 3, 1))


def test_is_placed_on():
    action = make_action(start_date=pendulum.naive(2024, 3, 10))
    assert is_placed_on(action, "2024-03-10", pendulum.date(2024, 3, 1))
    assert not is_placed_on(action, pendulum.date(2024, 3, 1), pendulum.date(2024, 3, 1))


def test_placement_map_keeps_every_day_and_input_order():
    today = pendulum.date(2024, 3, 6)
    first = make_action("first")
    second = make_action("second", start_date=pendulum.naive(2024, 3, 8))
    third = make_action("third")
    outside = make_action("outside", start_date=pendulum.naive(2024, 4, 1))
    done = make_action("done", status="Done", updated_at=pendulum.naive(2024, 3, 5, 12))
    days = [pendulum.date(2024, 3, d) for d in range(4, 11)]

    placements = placement_map([first, second, third, outside, done], days, today)

    assert list(placements) == days
    assert [a["title"] for a in placements[today]] == ["first", "third"]
    assert [a["title"] for a in placements[pendulum.date(2024, 3, 8)]] == ["second"]
    assert [a["title"] for a in placements[pendulum.date(2024, 3, 5)]] == ["done"]
    assert placements[pendulum.date(2024, 3, 10)] == []

    open_only = placement_map([done], days, today, include_terminal=False)
    assert open_only[pendulum.date(2024, 3, 5)] == []
