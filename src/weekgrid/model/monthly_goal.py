# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class Goal(TypedDict):
    tag_type: str
    target_hours: str


class MonthlyGoal(TypedDict):
    month: str
    goals: list[Goal]


class GoalRow(TypedDict):
    """A MonthlyGoal flattened for row oriented storage."""

    month: str
    tag_type: Optional[str]
    target_hours: Optional[str]


class TagProgress(TypedDict):
    tag_type: str
    color: str
    actual_minutes: int
    actual_time: str
    goal_minutes: int
    goal_time: str
    percentage: int
