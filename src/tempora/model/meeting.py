# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from tempora.model.entity_id import EntityId


class Meeting(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    title: str
    start: pendulum.DateTime
    end: Optional[pendulum.DateTime]
    location: Optional[str]
    participants: Optional[str]
    notes: Optional[str]
    tag_ids: list[EntityId]
    tags: list[str]
    created_at: Optional[pendulum.DateTime]
    updated_at: Optional[pendulum.DateTime]


class MeetingGeometry(TypedDict):
    top_offset: int
    height: int
    duration_minutes: int
    compact: bool
