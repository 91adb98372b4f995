# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tempora import configuration
from tempora.service.calendar_math import VIEW_GRANULARITIES

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be read or holds bad values."""

    pass


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
        defaults = configuration.get_default_configuration()

        if not configuration.APP_CONFIG_PATH.is_file():
            logger.debug("No configuration at %s, using defaults", configuration.APP_CONFIG_PATH)
            self._config = defaults
            return

        try:
            raw_config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            raise ConfigurationError(
                f"Cannot read configuration {configuration.APP_CONFIG_PATH}: {e}"
            ) from e

        if raw_config is None:
            raw_config = {}
        if not isinstance(raw_config, dict):
            raise ConfigurationError(
                f"Configuration {configuration.APP_CONFIG_PATH} must be a mapping"
            )

        # Back-fill keys added after the file was written
        for key, value in defaults.items():
            if key not in raw_config:
                raw_config[key] = value

        self._config = cast(configuration.Configuration, raw_config)
        self.__validate(self._config)

    def __validate(self, config: configuration.Configuration) -> None:
        if config["default_view"] not in VIEW_GRANULARITIES:
            raise ConfigurationError(
                f"default_view must be day, week, month or year, got {config['default_view']!r}"
            )
        if not 0 <= config["day_window_start"] <= 23:
            raise ConfigurationError(
                f"day_window_start must be an hour between 0 and 23, got {config['day_window_start']}"
            )
        if config["pixels_per_hour"] <= 0:
            raise ConfigurationError(
                f"pixels_per_hour must be positive, got {config['pixels_per_hour']}"
            )

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(
            dump(cast(dict[str, Any], config), Dumper=Dumper)
        )

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
        snapshot_path: Optional[str] = None,
        remove_snapshot_path: bool = False,
        default_view: Optional[str] = None,
        pixels_per_hour: Optional[int] = None,
        day_window_start: Optional[int] = None,
        show_header: Optional[bool] = None,
    ) -> None:
        config = deepcopy(self.config)

        if snapshot_path is not None:
            config["snapshot_path"] = snapshot_path
        if remove_snapshot_path:
            config["snapshot_path"] = None
        if default_view is not None:
            config["default_view"] = default_view
        if pixels_per_hour is not None:
            config["pixels_per_hour"] = pixels_per_hour
        if day_window_start is not None:
            config["day_window_start"] = day_window_start
        if show_header is not None:
            config["show_header"] = show_header

        # Rejected updates leave the current configuration untouched
        self.__validate(config)
        self._config = config
        self.is_dirty = True


CONFIGURATION_REPO = ConfigurationRepository()
