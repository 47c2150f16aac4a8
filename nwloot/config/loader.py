# -*- coding: utf-8 -*-
"""conf/settings.ini reader."""

from __future__ import annotations

import configparser
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

__all__ = ["DEFAULTS", "ConfigLoader", "get_config"]

DEFAULTS = {
    "PATHS": {
        "DATA_DIR": "data",
        "OUTPUT_DIR": "docs",
    },
    "SOURCE": {
        "REPOSITORY": "https://raw.githubusercontent.com/Kattoor/nw-datasheets-json/main/",
        "LOOT_TABLES": "javelindata_loottables.json",
        "LOOT_BUCKETS": "javelindata_lootbuckets.json",
        "TIMEOUT": "30",
    },
    "ANALYSIS": {
        "BUCKET_THRESHOLD": "1",
        "FORCE_MERGE": "false",
    },
}


class ConfigLoader:
    """Settings with built-in defaults; the ini file only overrides them."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        # project root: nwloot/config/* -> ../..
        self.project_root = Path(__file__).resolve().parents[2]
        self.config_path = Path(config_path) if config_path else self.project_root / "conf" / "settings.ini"

        self.config = configparser.ConfigParser()
        self.config.optionxform = str  # keep upper-case keys
        self.config.read_dict(DEFAULTS)
        if self.config_path.exists():
            self.config.read(self.config_path, encoding="utf-8")

    def get(self, section: str, key: str) -> Optional[str]:
        """Config value with user paths (~) expanded."""
        val = self.config.get(section, key, fallback=None)
        if val and "~" in val:
            return os.path.expanduser(val)
        return val

    def get_int(self, section: str, key: str) -> int:
        return self.config.getint(section, key)

    def get_bool(self, section: str, key: str) -> bool:
        return self.config.getboolean(section, key)

    def get_path(self, section: str, key: str) -> Path:
        """Path value; relative paths are taken from the project root."""
        p = Path(self.get(section, key) or "")
        return p if p.is_absolute() else self.project_root / p


@lru_cache(maxsize=1)
def get_config() -> ConfigLoader:
    return ConfigLoader()
