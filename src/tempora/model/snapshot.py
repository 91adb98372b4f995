# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from tempora.model.action import Action
from tempora.model.meeting import Meeting
from tempora.model.settings import Settings
from tempora.model.tag import Tag
from tempora.model.time_entry import TimeEntry


class Snapshot(TypedDict):
    actions: list[Action]
    meetings: list[Meeting]
    time_entries: list[TimeEntry]
    tags: list[Tag]
    settings: Optional[Settings]
