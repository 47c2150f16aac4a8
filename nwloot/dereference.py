# -*- coding: utf-8 -*-
"""Recursive expansion of loot table / loot bucket references into leaf items.

Probability and quantity compose multiplicatively along a reference chain:
an item three tables deep is as likely as the product of the roll
probabilities of every entry on the way down, and its quantity is scaled by
every quantity on the path.

Single-choice ("OR") sub-tables are renormalized over their own entries:
the denominator is the number of sibling entries that can be chosen, and
every leaf an entry expanded into is divided by it. A nested OR table thus
keeps its share as one entry of its parent.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple, Union

from nwloot.diagnostics import DiagnosticKind, DiagnosticLog
from nwloot.indexers import BUCKET_REFERENCE_PREFIX, TABLE_REFERENCE_PREFIX, ReferenceIndex
from nwloot.model import AnalyzedLootItem, LootBucket, LootTable, LootTableItem, NumberRange
from nwloot.probability import renormalize_entry_groups, roll_to_probability

__all__ = ["BUCKET_PICK_PREFIX", "Dereferencer"]

BUCKET_PICK_PREFIX = "Pick from loot bucket: "

# Reference tokens of the tables currently being expanded.
Path = Tuple[str, ...]


class Dereferencer:
    """Resolve `LootTableItem` entries into `AnalyzedLootItem` leaves.

    Parameters
    - index: cross-reference lookups for the data set.
    - bucket_threshold: buckets with more items than this are not expanded;
      a single placeholder leaf stands in for them.
    - diagnostics: receives unresolved / cyclic reference events.
    - accepts: optional eligibility predicate, applied to the leaves of a
      sub-table before it is renormalized.
    """

    def __init__(
        self,
        index: ReferenceIndex,
        *,
        bucket_threshold: int = 1,
        diagnostics: Optional[DiagnosticLog] = None,
        accepts: Optional[Callable[[AnalyzedLootItem], bool]] = None,
    ):
        self.index = index
        self.bucket_threshold = bucket_threshold
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self.accepts = accepts

    def expand_table(
        self,
        table: LootTable,
        base_quantity: Union[NumberRange, float] = 1,
        base_probability: float = 1.0,
        _path: Path = (),
    ) -> List[AnalyzedLootItem]:
        """Dereference every item of `table` (no filtering, no renormalization)."""
        groups = self.expand_entries(table, base_quantity, base_probability, _path)
        return [leaf for group in groups for leaf in group]

    def expand_entries(
        self,
        table: LootTable,
        base_quantity: Union[NumberRange, float] = 1,
        base_probability: float = 1.0,
        _path: Path = (),
    ) -> List[List[AnalyzedLootItem]]:
        """Leaves of `table`, grouped per table entry in source order."""
        path = _path + (TABLE_REFERENCE_PREFIX + table.loot_table_id,)
        return [self.dereference(item, table, base_quantity, base_probability, _path=path) for item in table.items]

    def dereference(
        self,
        item: LootTableItem,
        table: LootTable,
        base_quantity: Union[NumberRange, float] = 1,
        base_probability: float = 1.0,
        _path: Optional[Path] = None,
    ) -> List[AnalyzedLootItem]:
        if _path is None:
            _path = (TABLE_REFERENCE_PREFIX + table.loot_table_id,)

        probability = base_probability * roll_to_probability(table.max_roll, item.probability)
        quantity = item.quantity * base_quantity

        if item.name.startswith(TABLE_REFERENCE_PREFIX):
            referenced = self._lookup_table(item, table, _path)
            if referenced is not None:
                return self._expand_sub_table(referenced, quantity, probability, _path)
        elif item.name.startswith(BUCKET_REFERENCE_PREFIX):
            bucket = self._lookup_bucket(item, table)
            if bucket is not None:
                return self._expand_bucket(item, table, bucket, quantity, probability)

        return [self._leaf(item, item.name, quantity, probability)]

    # --------------------------------------------------------
    # Tables
    # --------------------------------------------------------

    def _lookup_table(self, item: LootTableItem, table: LootTable, path: Path) -> Optional[LootTable]:
        referenced = self.index.table(item.name[len(TABLE_REFERENCE_PREFIX):])
        if referenced is None:
            self.diagnostics.record(
                DiagnosticKind.UNKNOWN_TABLE_REFERENCE,
                table.loot_table_id,
                item.name,
                f"Loot table {table.loot_table_id} has unknown reference {item.name}",
            )
            return None
        if item.name in path:
            self._record_cycle(item, table, path)
            return None
        return referenced

    def _expand_sub_table(
        self,
        table: LootTable,
        quantity: NumberRange,
        probability: float,
        path: Path,
    ) -> List[AnalyzedLootItem]:
        groups = self.expand_entries(table, quantity, probability, _path=path)
        if self.accepts is not None:
            groups = [[leaf for leaf in group if self.accepts(leaf)] for group in groups]
        if not table.multiple:
            return renormalize_entry_groups(groups)
        return [leaf for group in groups for leaf in group]

    # --------------------------------------------------------
    # Buckets
    # --------------------------------------------------------

    def _lookup_bucket(self, item: LootTableItem, table: LootTable) -> Optional[LootBucket]:
        bucket = self.index.bucket(item.name[len(BUCKET_REFERENCE_PREFIX):])
        if bucket is None:
            self.diagnostics.record(
                DiagnosticKind.UNKNOWN_BUCKET_REFERENCE,
                table.loot_table_id,
                item.name,
                f"Loot table {table.loot_table_id} has unknown reference {item.name}",
            )
            return None
        return bucket

    def _expand_bucket(
        self,
        item: LootTableItem,
        table: LootTable,
        bucket: LootBucket,
        quantity: NumberRange,
        probability: float,
    ) -> List[AnalyzedLootItem]:
        if len(bucket.items) > self.bucket_threshold:
            self.diagnostics.record(
                DiagnosticKind.BUCKET_NOT_EXPANDED,
                table.loot_table_id,
                item.name,
                f"Loot bucket {bucket.name} has {len(bucket.items)} items "
                f"(threshold {self.bucket_threshold}), not expanded",
            )
            return [self._leaf(item, BUCKET_PICK_PREFIX + bucket.name, quantity, probability)]

        # MatchOne: every item qualifies on its own (selection depends on tags);
        # otherwise the bucket yields one of its items.
        share = probability if bucket.match_one or not bucket.items else probability / len(bucket.items)
        out: List[AnalyzedLootItem] = []
        for bucket_item in bucket.items:
            out.append(
                AnalyzedLootItem(
                    name=bucket_item.name,
                    quantity=quantity * bucket_item.quantity,
                    probability=share,
                    gear_score=item.gear_score,
                    perk_bucket_overrides=item.perk_bucket_overrides,
                    perk_overrides=item.perk_overrides,
                    conditions=bucket_item.conditions.copy(),
                )
            )
        return out

    # --------------------------------------------------------
    # Helpers
    # --------------------------------------------------------

    def _record_cycle(self, item: LootTableItem, table: LootTable, path: Path) -> None:
        chain = " -> ".join(path + (item.name,))
        self.diagnostics.record(
            DiagnosticKind.CYCLIC_REFERENCE,
            table.loot_table_id,
            item.name,
            f"Loot table {table.loot_table_id} has cyclic reference {item.name} ({chain})",
        )

    @staticmethod
    def _leaf(item: LootTableItem, name: str, quantity: NumberRange, probability: float) -> AnalyzedLootItem:
        return AnalyzedLootItem(
            name=name,
            quantity=quantity,
            probability=probability,
            gear_score=item.gear_score,
            perk_bucket_overrides=item.perk_bucket_overrides,
            perk_overrides=item.perk_overrides,
            conditions=item.conditions.copy(),
        )
