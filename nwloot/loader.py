# -*- coding: utf-8 -*-
"""Download + local cache of the loot datasheets."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import requests

from nwloot.config import ConfigLoader, get_config
from nwloot.model import Loot
from nwloot.parsers import parse_loot

__all__ = ["DataLoadError", "DataLoader"]

logger = logging.getLogger(__name__)


class DataLoadError(RuntimeError):
    """A datasheet could not be downloaded."""


class DataLoader:
    """Fetch datasheets from a remote repository into `data_dir` and parse them.

    `files` maps a role (`loot_tables`, `loot_buckets`) to a file name that is
    both the remote path below `repository` and the local cache file name.
    """

    def __init__(
        self,
        data_dir: Union[str, Path],
        repository: str,
        files: Dict[str, str],
        *,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        self.data_dir = Path(data_dir)
        self.repository = repository if repository.endswith("/") else repository + "/"
        self.files = dict(files)
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(
        cls,
        config: Optional[ConfigLoader] = None,
        *,
        data_dir: Optional[Union[str, Path]] = None,
        repository: Optional[str] = None,
    ) -> "DataLoader":
        cfg = config or get_config()
        return cls(
            data_dir if data_dir is not None else cfg.get_path("PATHS", "DATA_DIR"),
            repository or cfg.get("SOURCE", "REPOSITORY") or "",
            {
                "loot_tables": cfg.get("SOURCE", "LOOT_TABLES") or "",
                "loot_buckets": cfg.get("SOURCE", "LOOT_BUCKETS") or "",
            },
            timeout=cfg.get_int("SOURCE", "TIMEOUT"),
        )

    def path(self, role: str) -> Path:
        return self.data_dir / self.files[role]

    def data_files_exist(self) -> bool:
        return all(self.path(role).is_file() for role in self.files)

    def download(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        for role, name in self.files.items():
            url = self.repository + name
            logger.info("Downloading %s", url)
            try:
                response = self.session.get(url, timeout=self.timeout)
                response.raise_for_status()
            except requests.RequestException as e:
                raise DataLoadError(f"Failed to download {name}: {e}") from e
            self.path(role).write_text(response.text, encoding="utf-8")

    def ensure(self, force: bool = False) -> None:
        """Download when forced or when any data file is missing."""
        if force or not self.data_files_exist():
            self.download()

    def load(self) -> Loot:
        for role in self.files:
            if not self.path(role).is_file():
                raise FileNotFoundError(f"Data file missing: {self.path(role)}")
        loot = parse_loot(self.path("loot_tables"), self.path("loot_buckets"))
        logger.info("Loaded %d loot tables, %d loot buckets", len(loot.loot_tables), len(loot.loot_buckets))
        return loot
