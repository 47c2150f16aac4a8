# -*- coding: utf-8 -*-
"""Base classes for datasheet parsers.

Datasheets are JSON exports of spreadsheets: a list of row objects whose
columns repeat with a 1-based index suffix (`Item1`, `Item2`, ...).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from nwloot.model import NumberRange

__all__ = ["BaseParser", "Row", "parse_boolean", "parse_list", "parse_range"]

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


def parse_boolean(raw: Any) -> bool:
    """Booleans are stored as "TRUE" / "FALSE"; anything else is False."""
    return raw == "TRUE"


def parse_range(raw: Union[str, int, float, None]) -> NumberRange:
    """Parse "100" or "100-150" (or a plain number). Empty values give 0-0."""
    if not raw:
        return NumberRange(0, 0)
    if isinstance(raw, (int, float)):
        return NumberRange(raw, raw)
    text = str(raw).strip()
    low, sep, high = text.partition("-")
    if not sep:
        return NumberRange.single(int(float(text)))
    return NumberRange(int(float(low)), int(float(high)))


def parse_list(raw: Optional[str]) -> List[str]:
    """Split a comma-separated cell into trimmed, non-empty values."""
    if not raw or not str(raw).strip():
        return []
    return [v.strip() for v in str(raw).split(",") if v.strip()]


class BaseParser:
    def __init__(self, rows: List[Row], path: Optional[str] = None):
        self.path = path
        self.rows = [r for r in (rows or []) if isinstance(r, dict)]

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: str = "utf-8"):
        p = Path(path)
        logger.debug("Loading datasheet %s", p.name)
        rows = json.loads(p.read_text(encoding=encoding))
        if not isinstance(rows, list):
            raise ValueError(f"{p}: expected a list of rows, got {type(rows).__name__}")
        logger.debug("Loaded %d rows from %s", len(rows), p.name)
        return cls(rows, path=str(p))

    @staticmethod
    def _indexed(row: Row, column: str, start: int = 1) -> Iterator[Tuple[int, Any]]:
        """Yield (index, value) for `column1`, `column2`, ... while values are set."""
        i = start
        while row.get(f"{column}{i}"):
            yield i, row[f"{column}{i}"]
            i += 1
