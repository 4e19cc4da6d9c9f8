# SPDX-License-Identifier: MIT

from typing import Optional

from weekgrid.color import FALLBACK_TAG_COLOR, PALETTE
from weekgrid.model.errors import InvalidTagError
from weekgrid.model.tag import Tag, TagItem

# "Other": the tag type of a schedule whose tag cannot be resolved
DEFAULT_TAG_TYPE = "기타"


def color_for(tag_type: str, tags: list[Tag]) -> str:
    """
    Return the color of an existing tag type, or pick one for a new tag type.

    A new tag type gets the first palette color no tag uses yet. Once the
    palette is exhausted colors repeat, cycling by the number of tags.
    """
    for tag in tags:
        if tag["tag_type"] == tag_type:
            return tag["color"]

    used_colors = {tag["color"] for tag in tags}
    for color in PALETTE:
        if color not in used_colors:
            return color
    return PALETTE[len(tags) % len(PALETTE)]


def display_color(tag_type: str, tags: list[Tag]) -> str:
    for tag in tags:
        if tag["tag_type"] == tag_type and tag["color"]:
            return tag["color"]
    return FALLBACK_TAG_COLOR


def resolve_type(
    tag_name: str, tag_items: list[TagItem], stored_tag_type: Optional[str] = None
) -> str:
    """
    Resolve the tag type of a schedule's tag.

    The tag item lookup wins; a schedule's own stored tag type is only a
    cached fallback, and DEFAULT_TAG_TYPE is used when neither is known.
    """
    for tag_item in tag_items:
        if tag_item["tag_name"] == tag_name and tag_item["tag_type"]:
            return tag_item["tag_type"]
    if stored_tag_type:
        return stored_tag_type
    return DEFAULT_TAG_TYPE


def add_tag_item(
    tags: list[Tag], tag_items: list[TagItem], tag_type: str, tag_name: str
) -> tuple[list[Tag], list[TagItem]]:
    tag_type = tag_type.strip()
    tag_name = tag_name.strip()
    if not tag_type or not tag_name:
        raise InvalidTagError("Both a tag type and a tag name are required")

    new_tag_items = list(tag_items)
    if not any(
        item["tag_type"] == tag_type and item["tag_name"] == tag_name
        for item in tag_items
    ):
        new_tag_items.append({"tag_type": tag_type, "tag_name": tag_name})

    new_tags = list(tags)
    if not any(tag["tag_type"] == tag_type for tag in tags):
        new_tags.append({"tag_type": tag_type, "color": color_for(tag_type, tags)})

    return new_tags, new_tag_items


def remove_tag_item(
    tag_items: list[TagItem], tag_type: str, tag_name: str
) -> list[TagItem]:
    return [
        item
        for item in tag_items
        if not (item["tag_type"] == tag_type and item["tag_name"] == tag_name)
    ]


def remove_tag_type(
    tags: list[Tag], tag_items: list[TagItem], tag_type: str
) -> tuple[list[Tag], list[TagItem]]:
    return (
        [tag for tag in tags if tag["tag_type"] != tag_type],
        [item for item in tag_items if item["tag_type"] != tag_type],
    )


def tag_items_by_type(tag_items: list[TagItem]) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for item in tag_items:
        grouped.setdefault(item["tag_type"], []).append(item["tag_name"])
    return grouped
