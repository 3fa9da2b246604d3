# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from ganttline import configuration


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
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Fill in keys added after the config file was first written
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]
        if self._config["team_members"] is None:
            self._config["team_members"] = []

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(
            dump(config, Dumper=Dumper, sort_keys=False, allow_unicode=True)
        )

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def get_team_members(self) -> list[str]:
        return list(self.config["team_members"])

    def add_team_member(self, name: str) -> bool:
        if name in self.config["team_members"]:
            return False
        self.is_dirty = True
        self.config["team_members"].append(name)
        return True

    def remove_team_member(self, name: str) -> bool:
        if name not in self.config["team_members"]:
            return False
        self.is_dirty = True
        self.config["team_members"].remove(name)
        return True

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
        left_column_width: Optional[int] = None,
        timeline_width: Optional[int] = None,
        remove_timeline_width: bool = False,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if left_column_width is not None:
            self.config["left_column_width"] = left_column_width
        if timeline_width is not None:
            self.config["timeline_width"] = timeline_width
        if remove_timeline_width:
            self.config["timeline_width"] = None


CONFIGURATION_REPO = ConfigurationRepository()
