# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from tempora.model.entity_id import EntityId


class Tag(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    name: str
    color: Optional[str]
