# SPDX-License-Identifier: MIT

from copy import deepcopy

from weekgrid.model.entity_id import EntityId
from weekgrid.model.monthly_goal import Goal, MonthlyGoal, TagProgress
from weekgrid.model.monthly_plan import MonthlyPlan
from weekgrid.model.schedule import Schedule
from weekgrid.model.tag import Tag, TagItem
from weekgrid.model.user_data import UserData
from weekgrid.service.tag import display_color, resolve_type
from weekgrid.time import (
    duration_minutes,
    month_of,
    round_half_up,
    to_minutes,
    to_time_string,
)

TOTAL_KEY = "__total"


def schedules_in_month(schedules: list[Schedule], month: str) -> list[Schedule]:
    return [schedule for schedule in schedules if month_of(schedule["date"]) == month]


def goals_for_month(monthly_goals: list[MonthlyGoal], month: str) -> list[Goal]:
    for monthly_goal in monthly_goals:
        if monthly_goal["month"] == month:
            return deepcopy(monthly_goal["goals"])
    return []


def monthly_totals(
    schedules: list[Schedule], tag_items: list[TagItem], month: str
) -> dict[str, int]:
    """Minutes scheduled per tag type in month (YYYY-MM)."""
    totals: dict[str, int] = {}
    for schedule in schedules_in_month(schedules, month):
        tag_type = resolve_type(schedule["tag"], tag_items, schedule["tag_type"])
        duration = duration_minutes(schedule["start"], schedule["end"])
        totals[tag_type] = totals.get(tag_type, 0) + duration
    return totals


def percentage(actual_minutes: int, goal_minutes: int) -> int:
    """
    Completion of a goal in percent. Not clamped: overshooting a goal gives
    values above 100. A missing (zero) goal counts as 0%.
    """
    if goal_minutes == 0:
        return 0
    return round_half_up(actual_minutes / goal_minutes * 100)


def visible_tag_types(
    schedules: list[Schedule],
    tag_items: list[TagItem],
    monthly_goals: list[MonthlyGoal],
    month: str,
) -> list[str]:
    """
    Tag types worth showing for a month: those with a goal, then those used
    by the month's schedules. Tag types with neither are left out.
    """
    tag_types = [goal["tag_type"] for goal in goals_for_month(monthly_goals, month)]
    tag_types += [
        resolve_type(schedule["tag"], tag_items, schedule["tag_type"])
        for schedule in schedules_in_month(schedules, month)
    ]
    return list(dict.fromkeys(tag_types))


def tag_progress(
    schedules: list[Schedule],
    tag_items: list[TagItem],
    tags: list[Tag],
    monthly_goals: list[MonthlyGoal],
    month: str,
) -> list[TagProgress]:
    totals = monthly_totals(schedules, tag_items, month)
    goals = {goal["tag_type"]: goal for goal in goals_for_month(monthly_goals, month)}

    progress: list[TagProgress] = []
    for tag_type in visible_tag_types(schedules, tag_items, monthly_goals, month):
        actual_minutes = totals.get(tag_type, 0)
        goal = goals.get(tag_type)
        goal_minutes = to_minutes(goal["target_hours"]) if goal is not None else 0
        progress.append(
            {
                "tag_type": tag_type,
                "color": display_color(tag_type, tags),
                "actual_minutes": actual_minutes,
                "actual_time": to_time_string(actual_minutes),
                "goal_minutes": goal_minutes,
                "goal_time": goal["target_hours"] if goal is not None else "00:00",
                "percentage": percentage(actual_minutes, goal_minutes),
            }
        )
    return progress


def tag_totals(schedules: list[Schedule], tag_items: list[TagItem]) -> dict[str, str]:
    """
    "HH:MM" totals per tag type over the given schedules, plus the overall
    sum under TOTAL_KEY. Used for the weekly summary.
    """
    totals: dict[str, int] = {}
    total_minutes = 0
    for schedule in schedules:
        tag_type = resolve_type(schedule["tag"], tag_items, schedule["tag_type"])
        duration = duration_minutes(schedule["start"], schedule["end"])
        totals[tag_type] = totals.get(tag_type, 0) + duration
        total_minutes += duration

    formatted = {tag_type: to_time_string(minutes) for tag_type, minutes in totals.items()}
    formatted[TOTAL_KEY] = to_time_string(total_minutes)
    return formatted


def upsert_monthly_goal(
    monthly_goals: list[MonthlyGoal], monthly_goal: MonthlyGoal
) -> list[MonthlyGoal]:
    """Replace the entry for monthly_goal's month, or append one."""
    if any(goal["month"] == monthly_goal["month"] for goal in monthly_goals):
        return [
            monthly_goal if goal["month"] == monthly_goal["month"] else goal
            for goal in monthly_goals
        ]
    return [*monthly_goals, monthly_goal]


def set_goal(
    monthly_goals: list[MonthlyGoal], month: str, tag_type: str, target_hours: str
) -> list[MonthlyGoal]:
    # raises InvalidTimeError for a malformed target
    to_minutes(target_hours)
    goals = goals_for_month(monthly_goals, month)
    for goal in goals:
        if goal["tag_type"] == tag_type:
            goal["target_hours"] = target_hours
            break
    else:
        goals.append({"tag_type": tag_type, "target_hours": target_hours})
    return upsert_monthly_goal(monthly_goals, {"month": month, "goals": goals})


def remove_goal(
    monthly_goals: list[MonthlyGoal], month: str, tag_type: str
) -> list[MonthlyGoal]:
    goals = [
        goal for goal in goals_for_month(monthly_goals, month) if goal["tag_type"] != tag_type
    ]
    return upsert_monthly_goal(monthly_goals, {"month": month, "goals": goals})


def derive_goals_from_plans(
    monthly_plans: list[MonthlyPlan], monthly_goals: list[MonthlyGoal], month: str
) -> MonthlyGoal:
    """
    Seed a month's goals from its plans.

    Estimated hours are summed per tag type over the month's plans and
    written as "HH:00" targets, overwriting or adding that tag type's goal.
    Goals of tag types without plans are kept as they are.
    """
    hours_by_tag_type: dict[str, int] = {}
    for plan in monthly_plans:
        if plan["month"] == month:
            hours_by_tag_type[plan["tag_type"]] = (
                hours_by_tag_type.get(plan["tag_type"], 0) + plan["estimated_time"]
            )

    goals = goals_for_month(monthly_goals, month)
    for tag_type, total_hours in hours_by_tag_type.items():
        target_hours = f"{total_hours:02d}:00"
        for goal in goals:
            if goal["tag_type"] == tag_type:
                goal["target_hours"] = target_hours
                break
        else:
            goals.append({"tag_type": tag_type, "target_hours": target_hours})

    return {"month": month, "goals": goals}


def add_monthly_plan(
    monthly_plans: list[MonthlyPlan],
    monthly_goals: list[MonthlyGoal],
    plan: MonthlyPlan,
) -> tuple[list[MonthlyPlan], list[MonthlyGoal]]:
    new_plans = [*monthly_plans, plan]
    derived = derive_goals_from_plans(new_plans, monthly_goals, plan["month"])
    return new_plans, upsert_monthly_goal(monthly_goals, derived)


def remove_monthly_plan(
    monthly_plans: list[MonthlyPlan],
    monthly_goals: list[MonthlyGoal],
    plan_id: EntityId,
) -> tuple[list[MonthlyPlan], list[MonthlyGoal]]:
    """
    Remove a plan and re-derive its month's goals. The removed plan's tag
    type loses its goal when no plan for it is left; the month loses its goal
    entry altogether when it has no plans left.
    """
    removed = [plan for plan in monthly_plans if plan["id"] == plan_id]
    if not removed:
        return list(monthly_plans), list(monthly_goals)

    plan = removed[0]
    month = plan["month"]
    new_plans = [p for p in monthly_plans if p["id"] != plan_id]
    month_plans = [p for p in new_plans if p["month"] == month]

    if not month_plans:
        return new_plans, [goal for goal in monthly_goals if goal["month"] != month]

    new_goals = monthly_goals
    if not any(p["tag_type"] == plan["tag_type"] for p in month_plans):
        new_goals = remove_goal(new_goals, month, plan["tag_type"])
    derived = derive_goals_from_plans(new_plans, new_goals, month)
    return new_plans, upsert_monthly_goal(new_goals, derived)


def plans_for_month(monthly_plans: list[MonthlyPlan], month: str) -> list[MonthlyPlan]:
    return [plan for plan in monthly_plans if plan["month"] == month]


def clear_month(user_data: UserData, month: str) -> UserData:
    """Drop a month's schedules and goals. Plans are kept."""
    cleared = deepcopy(user_data)
    cleared["schedules"] = [
        schedule for schedule in cleared["schedules"] if month_of(schedule["date"]) != month
    ]
    cleared["monthly_goals"] = [
        goal for goal in cleared["monthly_goals"] if goal["month"] != month
    ]
    return cleared
