# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, Union

import pendulum

from tempora.model.entity_id import EntityId

TimeEntryType = Literal["work", "vacation", "sick", "balance"]

TIME_ENTRY_TYPES: tuple[TimeEntryType, ...] = ("work", "vacation", "sick", "balance")


class TimedDuration(TypedDict):
    kind: Literal["timed"]
    start: pendulum.Time
    end: pendulum.Time
    break_minutes: int


class ManualDuration(TypedDict):
    kind: Literal["manual"]
    minutes: int


EntryDuration = Union[TimedDuration, ManualDuration]


class TimeEntry(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    # Raw strings are kept as stored; the accounting engine skips unparsable ones
    date: Union[pendulum.Date, str]
    type: Optional[TimeEntryType]
    duration: EntryDuration
    description: Optional[str]
    action_id: Optional[EntityId]
