# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "tempora"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DEFAULT_SNAPSHOT_PATH: Path = DATA_PATH / "snapshot.yaml"


class Configuration(TypedDict):
    snapshot_path: Optional[str]
    default_view: str
    pixels_per_hour: int
    day_window_start: int
    show_header: bool


def get_default_configuration() -> Configuration:
    return {
        "snapshot_path": None,
        "default_view": "week",
        "pixels_per_hour": 60,
        "day_window_start": 0,
        "show_header": True,
    }


def resolve_snapshot_path(config: Configuration, override: Optional[Path] = None) -> Path:
    """Snapshot file to read: explicit override, configured path, then the default."""
    if override is not None:
        return override
    if config["snapshot_path"] is not None:
        return Path(config["snapshot_path"]).expanduser()
    return DEFAULT_SNAPSHOT_PATH
