# -*- coding: utf-8 -*-
"""Lookup maps for loot table / loot bucket cross-references."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from nwloot.model import Loot, LootBucket, LootTable

__all__ = ["TABLE_REFERENCE_PREFIX", "BUCKET_REFERENCE_PREFIX", "ReferenceIndex", "build_indexes"]

TABLE_REFERENCE_PREFIX = "[LTID]"
BUCKET_REFERENCE_PREFIX = "[LBID]"


@dataclass
class ReferenceIndex:
    tables_by_id: Dict[str, LootTable] = field(default_factory=dict)
    buckets_by_name: Dict[str, LootBucket] = field(default_factory=dict)

    def table(self, table_id: str) -> Optional[LootTable]:
        return self.tables_by_id.get(table_id)

    def bucket(self, name: str) -> Optional[LootBucket]:
        return self.buckets_by_name.get(name)


def build_indexes(loot: Loot) -> ReferenceIndex:
    """Index tables by id and buckets by name. Duplicates: last one wins."""
    index = ReferenceIndex()
    for table in loot.loot_tables:
        index.tables_by_id[table.loot_table_id] = table
    for bucket in loot.loot_buckets:
        index.buckets_by_name[bucket.name] = bucket
    return index
