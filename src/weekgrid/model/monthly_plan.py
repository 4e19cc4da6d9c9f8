# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from weekgrid.model.entity_id import EntityId


class MonthlyPlan(TypedDict):
    id: EntityId
    tag_type: str
    tag: str
    name: str
    description: Optional[str]
    estimated_time: int
    month: str
