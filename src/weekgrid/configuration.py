# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "weekgrid"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_USERS_PATH: Path = DATA_PATH / "users"
DATA_ROWS_PATH: Path = DATA_PATH / "rows"
DATA_USER_REGISTRY_PATH: Path = DATA_PATH / "users.yaml"

StorageBackend = Literal["document", "rows"]


class Configuration(TypedDict):
    data_path: Optional[str]
    storage_backend: StorageBackend
    default_user: Optional[str]
    slot_height_px: int
    auto_scroll_delay_ms: int
    auto_scroll_edge_px: int
    notice_seconds: int
    revert_on_save_failure: bool
    log_level: NotRequired[str]


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "storage_backend": "document",
        "default_user": None,
        "slot_height_px": 24,
        "auto_scroll_delay_ms": 300,
        "auto_scroll_edge_px": 50,
        "notice_seconds": 3,
        "revert_on_save_failure": False,
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_USERS_PATH, DATA_ROWS_PATH, DATA_USER_REGISTRY_PATH

    DATA_PATH = data_path
    DATA_USERS_PATH = DATA_PATH / "users"
    DATA_ROWS_PATH = DATA_PATH / "rows"
    DATA_USER_REGISTRY_PATH = DATA_PATH / "users.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
