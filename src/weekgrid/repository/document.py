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

from weekgrid import time
from weekgrid.model.user_data import SaveResult, UserData
from weekgrid.repository.gateway import safe_file_stem
from weekgrid.repository.registry import UserRegistry
from weekgrid.template.user_data import coerce_user_data, get_user_data_template


class DocumentUserDataRepository:
    """Stores each user's bundle as a single YAML document."""

    def __init__(self, users_path: Path, registry: UserRegistry) -> None:
        self.users_path = users_path
        self.registry = registry

    def __user_path(self, user_id: str) -> Path:
        return self.users_path / f"{safe_file_stem(user_id)}.yaml"

    def load(self, user_id: str) -> UserData:
        if not user_id:
            return get_user_data_template()

        file_path = self.__user_path(user_id)
        if not file_path.is_file():
            logger.debug(f"No stored data for {user_id}, starting empty")
            return get_user_data_template()

        try:
            raw_user_data = load(file_path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            logger.warning(f"Could not read data for {user_id}: {e}")
            return get_user_data_template()

        return coerce_user_data(raw_user_data)

    def save(self, user_id: str, user_data: UserData) -> SaveResult:
        if not user_id:
            return {"success": False, "error": "user id is required"}

        serializable_user_data: dict[str, Any] = dict(deepcopy(user_data))
        serializable_user_data["last_updated"] = time.now_iso_str()
        try:
            self.users_path.mkdir(parents=True, exist_ok=True)
            self.__user_path(user_id).write_text(
                dump(serializable_user_data, Dumper=Dumper, allow_unicode=True)
            )
            self.registry.register(user_id)
        except (OSError, YAMLError) as e:
            logger.error(f"Saving data for {user_id} failed: {e}")
            return {"success": False, "error": str(e)}

        logger.debug(f"Saved data for {user_id}")
        return {"success": True, "error": None}

    def list_users(self) -> list[str]:
        return self.registry.list_users()
