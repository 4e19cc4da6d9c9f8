# SPDX-License-Identifier: MIT

from typing import Any

from yaml import dump

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from weekgrid import configuration
from weekgrid import state as app_state
from weekgrid.logger import setup_logger
from weekgrid.repository.configuration import CONFIGURATION_REPO


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    setup_logger(config.get("log_level", "WARNING"))
    app_state.set_active_user(config["default_user"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __ensure_data_files() -> None:
    if not configuration.DATA_USER_REGISTRY_PATH.is_file():
        configuration.DATA_USER_REGISTRY_PATH.touch()
        registry: dict[str, Any] = {"users": []}
        configuration.DATA_USER_REGISTRY_PATH.write_text(dump(registry, Dumper=Dumper))

    if not configuration.DATA_USERS_PATH.is_dir():
        configuration.DATA_USERS_PATH.mkdir(parents=True, exist_ok=True)
    if not configuration.DATA_ROWS_PATH.is_dir():
        configuration.DATA_ROWS_PATH.mkdir(parents=True, exist_ok=True)
