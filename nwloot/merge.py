# -*- coding: utf-8 -*-
"""Collapse leaf items that share a name into one summary entry."""

from __future__ import annotations

from typing import Dict, List, Sequence

from nwloot.conditions import merge_conditions, widen_range
from nwloot.model import AnalyzedLootItem

__all__ = ["merge_items", "merge_duplicates"]


def merge_items(target: AnalyzedLootItem, source: AnalyzedLootItem) -> AnalyzedLootItem:
    """Return a new item combining two resolution paths to the same item.

    The paths are alternatives, so probabilities add up.
    """
    return AnalyzedLootItem(
        name=target.name,
        quantity=widen_range(target.quantity, source.quantity),
        probability=target.probability + source.probability,
        gear_score=widen_range(target.gear_score, source.gear_score),
        perk_bucket_overrides=target.perk_bucket_overrides or source.perk_bucket_overrides,
        perk_overrides=target.perk_overrides or source.perk_overrides,
        conditions=merge_conditions(target.conditions, source.conditions),
    )


def merge_duplicates(
    items: Sequence[AnalyzedLootItem],
    force_merging: bool = False,
    has_context: bool = False,
) -> List[AnalyzedLootItem]:
    """Merge duplicates by name, keeping the position of the first occurrence.

    Without a filtering context duplicates may carry mutually exclusive
    conditions, so they are only merged when `force_merging` is set.
    """
    if not (force_merging or has_context):
        return list(items)

    out: List[AnalyzedLootItem] = []
    positions: Dict[str, int] = {}
    for item in items:
        pos = positions.get(item.name)
        if pos is None:
            positions[item.name] = len(out)
            out.append(item)
        else:
            out[pos] = merge_items(out[pos], item)
    return out
