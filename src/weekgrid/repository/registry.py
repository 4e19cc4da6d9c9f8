# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, cast

from loguru import logger
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]


class UserRegistry:
    """
    The explicit index of every user that has saved data.

    Backends register a user on save, so listing users never depends on
    scanning storage keys or file names.
    """

    def __init__(self, registry_path: Path) -> None:
        self.registry_path = registry_path
        self._users: Optional[list[str]] = None

    @property
    def users(self) -> list[str]:
        if self._users is None:
            self.__load_data()
        return cast(list[str], self._users)

    def __load_data(self) -> None:
        self._users = []
        if not self.registry_path.is_file():
            return
        try:
            registry_data = load(self.registry_path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            logger.warning(f"Unreadable user registry {self.registry_path}: {e}")
            return
        if isinstance(registry_data, dict) and isinstance(registry_data.get("users"), list):
            self._users = [str(user) for user in registry_data["users"]]

    def __save_data(self) -> None:
        self.registry_path.parent.mkdir(parents=True, exist_ok=True)
        self.registry_path.write_text(dump({"users": self.users}, Dumper=Dumper))

    def register(self, user_id: str) -> None:
        if user_id not in self.users:
            self.users.append(user_id)
            self.__save_data()

    def list_users(self) -> list[str]:
        return sorted(self.users)
