# SPDX-License-Identifier: MIT

import pendulum

from tempora.model.entity_type import EntityType
from tempora.model.meeting import Meeting


def get_meeting_template(start: pendulum.DateTime) -> Meeting:
    return {
        "id": None,
        "entity_type": EntityType.MEETING,
        "title": "",
        "start": start,
        "end": start.add(hours=1),
        "location": None,
        "participants": None,
        "notes": None,
        "tag_ids": [],
        "tags": [],
        "created_at": None,
        "updated_at": None,
    }
