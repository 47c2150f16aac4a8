# -*- coding: utf-8 -*-
"""JSON-ready conversion of parsed and analyzed data."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from nwloot.diagnostics import Diagnostic
from nwloot.model import AnalyzedLootTable, Loot

__all__ = ["analysis_to_dict", "loot_to_dict"]


def analysis_to_dict(
    tables: Sequence[AnalyzedLootTable],
    diagnostics: Optional[Sequence[Diagnostic]] = None,
) -> Dict[str, Any]:
    return {
        "meta": {
            "generated": datetime.now().astimezone().isoformat(timespec="seconds"),
            "tables": len(tables),
        },
        "lootTables": [t.to_dict() for t in tables],
        "diagnostics": [d.to_dict() for d in diagnostics or []],
    }


def loot_to_dict(loot: Loot) -> Dict[str, Any]:
    return loot.to_dict()
