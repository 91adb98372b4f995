# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Mapping, TypedDict, Union

from tempora.color import (
    ACTION_DEFAULT_COLOR,
    BACKGROUND_TINT_ALPHA,
    MEETING_DEFAULT_COLOR,
    TAG_FALLBACK_COLOR,
    is_valid_hex,
    normalize_hex,
    saturation,
    with_alpha,
)
from tempora.model.action import Action
from tempora.model.entity_id import EntityId
from tempora.model.entity_type import EntityType
from tempora.model.meeting import Meeting
from tempora.model.tag import Tag

logger = logging.getLogger(__name__)

StyledItem = Union[Meeting, Action]

TagResolutionStrategy = Callable[[StyledItem, Mapping[EntityId, Tag]], list[Tag]]


class ItemStyle(TypedDict):
    color: str
    background: str
    border_left: str


def tags_by_tag_ids(item: StyledItem, tags_by_id: Mapping[EntityId, Tag]) -> list[Tag]:
    """Resolve the item's tags through its tag ids, skipping unknown ids."""
    return [tags_by_id[tag_id] for tag_id in item["tag_ids"] if tag_id in tags_by_id]


def tags_by_name(item: StyledItem, tags_by_id: Mapping[EntityId, Tag]) -> list[Tag]:
    """Resolve legacy free-form tag names against the known tags."""
    named: dict[str, Tag] = {}
    for tag in tags_by_id.values():
        # First tag with a given name wins
        named.setdefault(tag["name"], tag)
    return [named[name] for name in item["tags"] if name in named]


# Ordered: the first strategy returning any tag is used
TAG_RESOLUTION_STRATEGIES: tuple[TagResolutionStrategy, ...] = (
    tags_by_tag_ids,
    tags_by_name,
)


def resolve_tags(
    item: StyledItem,
    tags_by_id: Mapping[EntityId, Tag],
    strategies: tuple[TagResolutionStrategy, ...] = TAG_RESOLUTION_STRATEGIES,
) -> list[Tag]:
    for strategy in strategies:
        resolved = strategy(item, tags_by_id)
        if resolved:
            return resolved
    return []


def default_color(item: StyledItem) -> str:
    if item["entity_type"] == EntityType.MEETING:
        return MEETING_DEFAULT_COLOR
    return ACTION_DEFAULT_COLOR


def resolve_color(item: StyledItem, tags_by_id: Mapping[EntityId, Tag]) -> str:
    """
    Pick the representative color of an item from its tags.

    The most saturated tag color wins so that vivid labels beat gray ones.
    Ties keep the earlier tag. Tags with malformed colors are ignored and an
    item without usable tags gets the default color of its type.
    """
    candidates: list[tuple[Tag, float]] = []
    for tag in resolve_tags(item, tags_by_id):
        if not is_valid_hex(tag["color"]):
            logger.debug("Ignoring tag %s with malformed color %r", tag["name"], tag["color"])
            continue
        candidates.append((tag, saturation(tag["color"])))  # type: ignore[arg-type]

    if not candidates:
        return default_color(item)

    # sorted() is stable, so equal saturations keep list order
    candidates = sorted(candidates, key=lambda candidate: candidate[1], reverse=True)
    return normalize_hex(candidates[0][0]["color"])  # type: ignore[arg-type]


def item_style(item: StyledItem, tags_by_id: Mapping[EntityId, Tag]) -> ItemStyle:
    """Background tint and left border accent derived from the item color."""
    color = resolve_color(item, tags_by_id)
    return {
        "color": color,
        "background": with_alpha(color, BACKGROUND_TINT_ALPHA),
        "border_left": color,
    }


def tag_color(tag: Tag) -> str:
    """Color of a tag chip, gray when the stored value is malformed."""
    if is_valid_hex(tag["color"]):
        return normalize_hex(tag["color"])  # type: ignore[arg-type]
    return TAG_FALLBACK_COLOR


def index_tags(tags: list[Tag]) -> dict[EntityId, Tag]:
    return {tag["id"]: tag for tag in tags if tag["id"] is not None}
