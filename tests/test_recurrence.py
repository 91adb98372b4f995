# SPDX-License-Identifier: MIT

import pendulum
import pytest

from conftest import make_meeting
from tempora.service.meeting import MeetingValidationError, validate_meeting
from tempora.service.recurrence import RecurrenceValidationError, expand


def weekly_standup():
    return make_meeting(
        pendulum.naive(2024, 1, 1, 9),
        pendulum.naive(2024, 1, 1, 10),
        title="standup",
        id="m-1",
        tag_ids=["team"],
        location="Room 4",
    )


def test_weekly_rule_yields_base_and_four_instances():
    base = weekly_standup()
    meetings = expand(
        base, {"interval_count": 1, "unit": "week", "end_date": pendulum.date(2024, 1, 29)}
    )

    assert len(meetings) == 5
    assert meetings[0] == base
    for previous, current in zip(meetings, meetings[1:]):
        assert (current["start"] - previous["start"]).in_days() == 7
    for meeting in meetings:
        assert (meeting["end"] - meeting["start"]).in_minutes() == 60


def test_instances_copy_base_fields_without_id():
    meetings = expand(
        weekly_standup(),
        {"interval_count": 2, "unit": "day", "end_date": pendulum.date(2024, 1, 5)},
    )
    assert [m["start"].day for m in meetings] == [1, 3, 5]
    assert meetings[0]["id"] == "m-1"
    for instance in meetings[1:]:
        assert instance["id"] is None
        assert instance["title"] == "standup"
        assert instance["location"] == "Room 4"
        assert instance["tag_ids"] == ["team"]


def test_daily_rule_is_capped():
    meetings = expand(
        weekly_standup(),
        {"interval_count": 1, "unit": "day", "end_date": pendulum.date(2026, 9, 27)},
    )
    assert len(meetings) == 366


def test_end_date_is_inclusive_for_late_meetings():
    base = make_meeting(pendulum.naive(2024, 1, 1, 23, 30), pendulum.naive(2024, 1, 1, 23, 45))
    meetings = expand(
        base, {"interval_count": 1, "unit": "day", "end_date": pendulum.date(2024, 1, 3)}
    )
    assert meetings[-1]["start"] == pendulum.naive(2024, 1, 3, 23, 30)


def test_monthly_rule_clamps_without_drifting():
    base = make_meeting(pendulum.naive(2024, 1, 31, 15), pendulum.naive(2024, 1, 31, 16))
    meetings = expand(
        base, {"interval_count": 1, "unit": "month", "end_date": pendulum.date(2024, 5, 31)}
    )
    assert [m["start"].to_date_string() for m in meetings] == [
        "2024-01-31",
        "2024-02-29",
        "2024-03-31",
        "2024-04-30",
        "2024-05-31",
    ]


def test_incomplete_rule_returns_only_the_base():
    base = weekly_standup()
    assert expand(base, None) == [base]
    assert expand(base, {"interval_count": 1, "unit": "week", "end_date": None}) == [base]
    assert expand(base, {"interval_count": None, "unit": "week", "end_date": pendulum.date(2024, 2, 1)}) == [base]


def test_expansion_does_not_mutate_the_base():
    base = weekly_standup()
    meetings = expand(
        base, {"interval_count": 1, "unit": "week", "end_date": pendulum.date(2024, 1, 8)}
    )
    meetings[0]["title"] = "changed"
    assert base["title"] == "standup"


def test_invalid_rules_raise():
    with pytest.raises(RecurrenceValidationError):
        expand(
            weekly_standup(),
            {"interval_count": 0, "unit": "week", "end_date": pendulum.date(2024, 2, 1)},
        )
    with pytest.raises(RecurrenceValidationError):
        expand(
            weekly_standup(),
            {"interval_count": 1, "unit": "fortnight", "end_date": pendulum.date(2024, 2, 1)},  # type: ignore[typeddict-item]
        )


def test_meeting_must_end_after_start():
    start = pendulum.naive(2024, 1, 1, 9)
    with pytest.raises(MeetingValidationError):
        validate_meeting(make_meeting(start, start))
    with pytest.raises(MeetingValidationError):
        expand(make_meeting(start, start.subtract(minutes=5)), None)
    assert validate_meeting(make_meeting(start)) is not None
