# SPDX-License-Identifier: MIT

from typing import TypedDict


class Tag(TypedDict):
    tag_type: str
    color: str


class TagItem(TypedDict):
    tag_type: str
    tag_name: str
