# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

from weekgrid.model.monthly_goal import MonthlyGoal
from weekgrid.model.monthly_plan import MonthlyPlan
from weekgrid.model.schedule import Schedule
from weekgrid.model.tag import Tag, TagItem

USER_DATA_FIELDS = (
    "schedules",
    "tags",
    "tag_items",
    "monthly_plans",
    "monthly_goals",
)


class UserData(TypedDict):
    schedules: list[Schedule]
    tags: list[Tag]
    tag_items: list[TagItem]
    monthly_plans: list[MonthlyPlan]
    monthly_goals: list[MonthlyGoal]


class SaveResult(TypedDict):
    success: bool
    error: NotRequired[Optional[str]]
