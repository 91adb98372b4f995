# SPDX-License-Identifier: MIT

from typing import Optional

from tempora.model.entity_type import EntityType
from tempora.model.tag import Tag


def get_tag_template(name: str, color: Optional[str] = None) -> Tag:
    return {
        "id": None,
        "entity_type": EntityType.TAG,
        "name": name,
        "color": color,
    }
