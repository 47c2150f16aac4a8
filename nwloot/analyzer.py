# -*- coding: utf-8 -*-
"""LootAnalyzer: resolve loot tables into per-item drop probabilities.

Pipeline per table
1. dereference every item (tables / buckets expanded recursively)
2. drop items whose conditions fail the probability context
3. renormalize single-choice tables per entry (a referenced table counts once)
4. merge duplicate leaves

Luck bonuses are not taken into account.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Union

from nwloot.conditions import ProbabilityContext, is_eligible
from nwloot.dereference import Dereferencer
from nwloot.diagnostics import Diagnostic, DiagnosticLog
from nwloot.indexers import ReferenceIndex, build_indexes
from nwloot.merge import merge_duplicates
from nwloot.model import AnalyzedLootItem, AnalyzedLootTable, Loot, LootTable
from nwloot.probability import renormalize_entry_groups

__all__ = ["AnalyzerSettings", "LootAnalyzer", "TableSelector"]

TableSelector = Union[None, str, Iterable[str]]


@dataclass(frozen=True)
class AnalyzerSettings:
    """Options for one analyzer instance.

    - context: default probability context (empty = no filtering).
    - force_merge: merge duplicates even without a context.
    - bucket_threshold: largest loot bucket that is expanded item by item.
    """

    context: ProbabilityContext = field(default_factory=ProbabilityContext)
    force_merge: bool = False
    bucket_threshold: int = 1

    def __post_init__(self) -> None:
        if self.bucket_threshold < 0:
            raise ValueError(f"bucket_threshold must be >= 0, got {self.bucket_threshold}")


def _selected_ids(tables: TableSelector) -> Optional[Set[str]]:
    if tables is None:
        return None
    if isinstance(tables, str):
        return {tables}
    ids = {str(t) for t in tables}
    return ids or None


class LootAnalyzer:
    """Analyze a parsed `Loot` data set.

    The reference index is built on the first `analyze()` call and reused.
    `diagnostics` holds the events of the most recent call.
    """

    def __init__(self, loot: Loot, settings: Optional[AnalyzerSettings] = None):
        if loot is None:
            raise ValueError("LootAnalyzer requires a loot data set")
        self.loot = loot
        self.settings = settings or AnalyzerSettings()
        self._index: Optional[ReferenceIndex] = None
        self._diagnostics = DiagnosticLog()

    @property
    def index(self) -> ReferenceIndex:
        if self._index is None:
            self._index = build_indexes(self.loot)
        return self._index

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return self._diagnostics.events()

    def analyze(
        self,
        tables: TableSelector = None,
        context: Optional[ProbabilityContext] = None,
    ) -> List[AnalyzedLootTable]:
        ctx = context if context is not None else self.settings.context
        selected = _selected_ids(tables)
        self._diagnostics = DiagnosticLog()

        def accepts(item: AnalyzedLootItem) -> bool:
            return is_eligible(item.conditions, ctx)

        deref = Dereferencer(
            self.index,
            bucket_threshold=self.settings.bucket_threshold,
            diagnostics=self._diagnostics,
            accepts=accepts,
        )

        out: List[AnalyzedLootTable] = []
        for table in self.loot.loot_tables:
            if selected is not None and table.loot_table_id not in selected:
                continue
            out.append(self._analyze_table(table, deref, ctx))
        return out

    def _analyze_table(
        self,
        table: LootTable,
        deref: Dereferencer,
        ctx: ProbabilityContext,
    ) -> AnalyzedLootTable:
        groups = [
            [leaf for leaf in deref.dereference(item, table) if is_eligible(leaf.conditions, ctx)]
            for item in table.items
        ]
        if table.multiple:
            items = [leaf for group in groups for leaf in group]
        else:
            items = renormalize_entry_groups(groups)
        items = merge_duplicates(items, self.settings.force_merge, not ctx.is_empty())

        return AnalyzedLootTable(
            id=table.loot_table_id,
            multiple=table.multiple,
            high_water_mark_multiplier=table.high_water_mark_multiplier,
            use_level_gear_score=table.use_level_gear_score,
            gear_score_bonus=table.gear_score_bonus,
            luck_safe=table.luck_safe,
            items=items,
        )
