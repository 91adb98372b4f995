# SPDX-License-Identifier: MIT

from typing import Iterable

import pendulum

from tempora.model.action import TERMINAL_STATUSES, Action
from tempora.time import DateLike, to_date, to_date_optional


def is_terminal(action: Action) -> bool:
    """Done and Archived actions no longer move with the calendar."""
    return action["status"] in TERMINAL_STATUSES


def placement_day(action: Action, today: DateLike) -> pendulum.Date:
    """
    Get the single calendar day an action is displayed on.

    Completed actions stay on the day they were last updated (or created).
    Open work is shown on its planned start while that lies in the future,
    on its due day once overdue, and on today otherwise.
    """
    current_day = to_date(today)

    if is_terminal(action):
        completed = action["updated_at"] or action["created_at"]
        if completed is not None:
            return to_date(completed)
        return current_day

    start = to_date_optional(action["start_date"] or action["created_at"]) or current_day
    due = to_date_optional(action["due_date"])

    if current_day < start:
        return start
    if due is not None and current_day > due:
        return due
    return current_day


def is_placed_on(action: Action, day: DateLike, today: DateLike) -> bool:
    return placement_day(action, today) == to_date(day)


def is_overdue(action: Action, today: DateLike) -> bool:
    """Not finished and due strictly before today."""
    if is_terminal(action):
        return False
    due = to_date_optional(action["due_date"])
    return due is not None and due < to_date(today)


def placement_map(
    actions: Iterable[Action],
    days: Iterable[DateLike],
    today: DateLike,
    include_terminal: bool = True,
) -> dict[pendulum.Date, list[Action]]:
    """
    Group actions by the rendered day they are placed on.

    Every requested day is present in the result, possibly with an empty list.
    Actions placed outside the requested days are dropped. Input order is kept
    within each day.
    """
    current_day = to_date(today)
    placements: dict[pendulum.Date, list[Action]] = {to_date(day): [] for day in days}

    for action in actions:
        if not include_terminal and is_terminal(action):
            continue
        day = placement_day(action, current_day)
        if day in placements:
            placements[day].append(action)

    return placements
