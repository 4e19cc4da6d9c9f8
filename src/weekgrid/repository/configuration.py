# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from weekgrid import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = configuration.get_default_configuration()
            return

        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Migration: add any setting introduced after the file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        storage_backend: Optional[configuration.StorageBackend] = None,
        default_user: Optional[str] = None,
        remove_default_user: bool = False,
        slot_height_px: Optional[int] = None,
        auto_scroll_delay_ms: Optional[int] = None,
        auto_scroll_edge_px: Optional[int] = None,
        notice_seconds: Optional[int] = None,
        revert_on_save_failure: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if storage_backend is not None:
            self.config["storage_backend"] = storage_backend
        if default_user is not None:
            self.config["default_user"] = default_user
        if remove_default_user:
            self.config["default_user"] = None
        if slot_height_px is not None:
            self.config["slot_height_px"] = slot_height_px
        if auto_scroll_delay_ms is not None:
            self.config["auto_scroll_delay_ms"] = auto_scroll_delay_ms
        if auto_scroll_edge_px is not None:
            self.config["auto_scroll_edge_px"] = auto_scroll_edge_px
        if notice_seconds is not None:
            self.config["notice_seconds"] = notice_seconds
        if revert_on_save_failure is not None:
            self.config["revert_on_save_failure"] = revert_on_save_failure
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
