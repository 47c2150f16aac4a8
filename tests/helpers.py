"""
Builders for small in-memory loot data sets used across the test suite.
"""

from typing import Iterable, Optional, Sequence, Tuple

from nwloot.model import (
    Conditions,
    Loot,
    LootBucket,
    LootBucketItem,
    LootTable,
    LootTableItem,
    NumberRange,
)


def make_item(
    name: str,
    probability: int = 0,
    quantity: Tuple[float, float] = (1, 1),
    gear_score: Optional[Tuple[float, float]] = None,
    conditions: Optional[Conditions] = None,
) -> LootTableItem:
    return LootTableItem(
        name=name,
        probability=probability,
        quantity=NumberRange(*quantity),
        gear_score=NumberRange(*gear_score) if gear_score else None,
        conditions=conditions or Conditions(),
    )


def make_table(
    table_id: str,
    items: Sequence[LootTableItem],
    max_roll: int = 100,
    and_or: Optional[str] = None,
) -> LootTable:
    return LootTable(loot_table_id=table_id, and_or=and_or, max_roll=max_roll, items=list(items))


def make_bucket(
    name: str,
    item_names: Iterable[str],
    match_one: bool = False,
    quantity: Tuple[float, float] = (1, 1),
) -> LootBucket:
    return LootBucket(
        name=name,
        match_one=match_one,
        items=[LootBucketItem(name=n, quantity=NumberRange(*quantity)) for n in item_names],
    )


def make_loot(tables: Sequence[LootTable], buckets: Sequence[LootBucket] = ()) -> Loot:
    return Loot(loot_tables=list(tables), loot_buckets=list(buckets))
