# SPDX-License-Identifier: MIT

from typing import Any, cast

from weekgrid.model.entity_id import generate_entity_id
from weekgrid.model.monthly_goal import Goal, MonthlyGoal
from weekgrid.model.monthly_plan import MonthlyPlan
from weekgrid.model.schedule import Schedule
from weekgrid.model.tag import Tag, TagItem
from weekgrid.model.user_data import USER_DATA_FIELDS, UserData

# Bundles written by older clients used camelCase keys
_LEGACY_KEYS = {
    "tagItems": "tag_items",
    "monthlyPlans": "monthly_plans",
    "monthlyGoals": "monthly_goals",
    "tagType": "tag_type",
    "tagName": "tag_name",
    "targetHours": "target_hours",
    "estimatedTime": "estimated_time",
}


def get_user_data_template() -> UserData:
    return {
        "schedules": [],
        "tags": [],
        "tag_items": [],
        "monthly_plans": [],
        "monthly_goals": [],
    }


def coerce_user_data(raw: Any) -> UserData:
    """
    Turn whatever was read from storage into a renderable bundle.

    Every expected list field that is missing or not a list becomes [],
    entries that are not mappings are dropped, and missing entry keys get
    their defaults. Schedules and plans without an id, or sharing one, get
    a fresh id. Never raises.
    """
    user_data = get_user_data_template()
    if not isinstance(raw, dict):
        return user_data

    raw = __rename_legacy_keys(raw)
    for field in USER_DATA_FIELDS:
        value = raw.get(field)
        if not isinstance(value, list):
            continue
        entries = [__rename_legacy_keys(entry) for entry in value if isinstance(entry, dict)]
        if field == "schedules":
            user_data["schedules"] = __unique_ids(
                [__coerce_schedule(entry) for entry in entries if __has_times(entry)]
            )
        elif field == "tags":
            user_data["tags"] = [
                __coerce_tag(entry) for entry in entries if entry.get("tag_type")
            ]
        elif field == "tag_items":
            user_data["tag_items"] = [
                cast(
                    TagItem,
                    {
                        "tag_type": str(entry.get("tag_type") or ""),
                        "tag_name": str(entry.get("tag_name") or ""),
                    },
                )
                for entry in entries
                if entry.get("tag_name")
            ]
        elif field == "monthly_plans":
            user_data["monthly_plans"] = __unique_ids(
                [__coerce_plan(entry) for entry in entries]
            )
        elif field == "monthly_goals":
            user_data["monthly_goals"] = [
                __coerce_monthly_goal(entry) for entry in entries if entry.get("month")
            ]
    return user_data


def __rename_legacy_keys(entry: dict[str, Any]) -> dict[str, Any]:
    return {_LEGACY_KEYS.get(key, key): value for key, value in entry.items()}


def __unique_ids(entries: list[Any]) -> list[Any]:
    seen: set[str] = set()
    for entry in entries:
        if not entry["id"] or entry["id"] in seen:
            entry["id"] = generate_entity_id()
        seen.add(entry["id"])
    return entries


def __has_times(entry: dict[str, Any]) -> bool:
    return (
        isinstance(entry.get("date"), str)
        and isinstance(entry.get("start"), str)
        and isinstance(entry.get("end"), str)
    )


def __coerce_schedule(entry: dict[str, Any]) -> Schedule:
    return {
        "id": str(entry.get("id") or ""),
        "date": entry["date"],
        "start": entry["start"],
        "end": entry["end"],
        "title": str(entry.get("title") or ""),
        "description": entry.get("description"),
        "tag": str(entry.get("tag") or ""),
        "tag_type": str(entry.get("tag_type") or ""),
        "done": bool(entry.get("done", False)),
    }


def __coerce_tag(entry: dict[str, Any]) -> Tag:
    color = entry.get("color")
    # older bundles stored {bg, text} class pairs
    if not isinstance(color, str):
        color = ""
    return {"tag_type": str(entry["tag_type"]), "color": color}


def __coerce_plan(entry: dict[str, Any]) -> MonthlyPlan:
    try:
        estimated_time = int(entry.get("estimated_time") or 0)
    except (TypeError, ValueError):
        estimated_time = 0
    return {
        "id": str(entry.get("id") or ""),
        "tag_type": str(entry.get("tag_type") or ""),
        "tag": str(entry.get("tag") or ""),
        "name": str(entry.get("name") or ""),
        "description": entry.get("description"),
        "estimated_time": estimated_time,
        "month": str(entry.get("month") or ""),
    }


def __coerce_monthly_goal(entry: dict[str, Any]) -> MonthlyGoal:
    goals: list[Goal] = []
    raw_goals = entry.get("goals")
    if isinstance(raw_goals, list):
        for goal in raw_goals:
            if not isinstance(goal, dict):
                continue
            goal = __rename_legacy_keys(goal)
            if goal.get("tag_type") and isinstance(goal.get("target_hours"), str):
                goals.append(
                    {"tag_type": str(goal["tag_type"]), "target_hours": goal["target_hours"]}
                )
    return {"month": str(entry["month"]), "goals": goals}
