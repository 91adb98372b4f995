# SPDX-License-Identifier: MIT

from typing import Iterable, TypedDict

import pendulum

from tempora.model.action import Action
from tempora.model.meeting import Meeting
from tempora.model.time_entry import TimeEntry
from tempora.service.accounting import date_entries
from tempora.service.day_classifier import is_overdue, is_terminal
from tempora.service.time_entry import entry_minutes

UPCOMING_MEETINGS_LIMIT = 3


class Dashboard(TypedDict):
    overdue_actions: list[Action]
    pending_actions: list[Action]
    focus_actions: list[Action]
    upcoming_meetings: list[Meeting]
    minutes_logged_today: int


def upcoming_meetings(
    meetings: Iterable[Meeting],
    now: pendulum.DateTime,
    limit: int = UPCOMING_MEETINGS_LIMIT,
) -> list[Meeting]:
    """The next meetings starting strictly after now, soonest first."""
    future = [meeting for meeting in meetings if meeting["start"] > now]
    future.sort(key=lambda meeting: meeting["start"])
    return future[:limit]


def minutes_logged_on(entries: Iterable[TimeEntry], day: pendulum.Date) -> int:
    return sum(
        entry_minutes(entry)
        for entry_day, entry in date_entries(entries)
        if entry_day == day
    )


def build_dashboard(
    actions: list[Action],
    meetings: list[Meeting],
    entries: list[TimeEntry],
    now: pendulum.DateTime,
) -> Dashboard:
    today = now.date()
    open_actions = [action for action in actions if not is_terminal(action)]
    return {
        "overdue_actions": [action for action in open_actions if is_overdue(action, today)],
        "pending_actions": open_actions,
        "focus_actions": [action for action in open_actions if action["is_focus"]],
        "upcoming_meetings": upcoming_meetings(meetings, now),
        "minutes_logged_today": minutes_logged_on(entries, today),
    }
