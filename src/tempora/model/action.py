# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from tempora.model.entity_id import EntityId

ActionStatus = Literal["Open", "Doing", "Waiting", "Done", "Archived"]
ActionPriority = Literal["Low", "Medium", "High"]

ACTION_STATUSES: tuple[ActionStatus, ...] = (
    "Open",
    "Doing",
    "Waiting",
    "Done",
    "Archived",
)
TERMINAL_STATUSES: frozenset[str] = frozenset({"Done", "Archived"})


class Action(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    title: str
    description: Optional[str]
    status: ActionStatus
    priority: ActionPriority
    start_date: Optional[pendulum.DateTime]
    due_date: Optional[pendulum.DateTime]
    created_at: Optional[pendulum.DateTime]
    updated_at: Optional[pendulum.DateTime]
    tag_ids: list[EntityId]
    tags: list[str]
    meeting_id: Optional[EntityId]
    is_focus: bool
