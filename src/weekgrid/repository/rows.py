# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any

from loguru import logger
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from weekgrid.model.monthly_goal import GoalRow, MonthlyGoal
from weekgrid.model.user_data import SaveResult, UserData
from weekgrid.repository.gateway import safe_file_stem
from weekgrid.repository.registry import UserRegistry
from weekgrid.template.user_data import coerce_user_data, get_user_data_template

_TABLES = ("schedules", "tags", "tag_items", "monthly_plans", "monthly_goals")


class RowUserDataRepository:
    """
    Stores each user's bundle as one row table per entity kind.

    Every schedule, tag, tag item and plan is a row; monthly goals are
    flattened into (month, tag_type, target_hours) rows and regrouped on
    load. A month whose goal list is empty keeps a single row with a null
    tag_type so it survives the round trip.
    """

    def __init__(self, rows_path: Path, registry: UserRegistry) -> None:
        self.rows_path = rows_path
        self.registry = registry

    def __user_dir(self, user_id: str) -> Path:
        return self.rows_path / safe_file_stem(user_id)

    def load(self, user_id: str) -> UserData:
        if not user_id:
            return get_user_data_template()

        user_dir = self.__user_dir(user_id)
        if not user_dir.is_dir():
            logger.debug(f"No stored rows for {user_id}, starting empty")
            return get_user_data_template()

        raw_user_data: dict[str, Any] = {}
        for table in _TABLES:
            raw_user_data[table] = self.__load_table(user_dir / f"{table}.yaml")
        raw_user_data["monthly_goals"] = _group_goal_rows(raw_user_data["monthly_goals"])
        return coerce_user_data(raw_user_data)

    def __load_table(self, table_path: Path) -> list[Any]:
        if not table_path.is_file():
            return []
        try:
            table_data = load(table_path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            logger.warning(f"Could not read rows from {table_path}: {e}")
            return []
        if not isinstance(table_data, dict) or not isinstance(table_data.get("rows"), list):
            return []
        return table_data["rows"]

    def save(self, user_id: str, user_data: UserData) -> SaveResult:
        if not user_id:
            return {"success": False, "error": "user id is required"}

        tables: dict[str, list[Any]] = {
            "schedules": deepcopy(user_data["schedules"]),
            "tags": deepcopy(user_data["tags"]),
            "tag_items": deepcopy(user_data["tag_items"]),
            "monthly_plans": deepcopy(user_data["monthly_plans"]),
            "monthly_goals": _flatten_goals(user_data["monthly_goals"]),
        }
        user_dir = self.__user_dir(user_id)
        try:
            user_dir.mkdir(parents=True, exist_ok=True)
            for table, rows in tables.items():
                (user_dir / f"{table}.yaml").write_text(
                    dump({"rows": rows}, Dumper=Dumper, allow_unicode=True)
                )
            self.registry.register(user_id)
        except (OSError, YAMLError) as e:
            logger.error(f"Saving rows for {user_id} failed: {e}")
            return {"success": False, "error": str(e)}

        logger.debug(f"Saved {len(tables['schedules'])} schedule rows for {user_id}")
        return {"success": True, "error": None}

    def list_users(self) -> list[str]:
        return self.registry.list_users()


def _flatten_goals(monthly_goals: list[MonthlyGoal]) -> list[GoalRow]:
    rows: list[GoalRow] = []
    for monthly_goal in monthly_goals:
        if not monthly_goal["goals"]:
            rows.append(
                {"month": monthly_goal["month"], "tag_type": None, "target_hours": None}
            )
        for goal in monthly_goal["goals"]:
            rows.append(
                {
                    "month": monthly_goal["month"],
                    "tag_type": goal["tag_type"],
                    "target_hours": goal["target_hours"],
                }
            )
    return rows


def _group_goal_rows(rows: list[Any]) -> list[dict[str, Any]]:
    grouped: dict[str, list[dict[str, Any]]] = {}
    for row in rows:
        if not isinstance(row, dict) or not row.get("month"):
            continue
        goals = grouped.setdefault(str(row["month"]), [])
        if row.get("tag_type"):
            goals.append(
                {"tag_type": row["tag_type"], "target_hours": row.get("target_hours")}
            )
    return [{"month": month, "goals": goals} for month, goals in grouped.items()]
