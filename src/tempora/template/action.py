# SPDX-License-Identifier: MIT

from tempora.model.action import Action
from tempora.model.entity_type import EntityType


def get_action_template() -> Action:
    return {
        "id": None,
        "entity_type": EntityType.ACTION,
        "title": "",
        "description": None,
        "status": "Open",
        "priority": "Medium",
        "start_date": None,
        "due_date": None,
        "created_at": None,
        "updated_at": None,
        "tag_ids": [],
        "tags": [],
        "meeting_id": None,
        "is_focus": False,
    }
