# -*- coding: utf-8 -*-
"""Roll threshold -> probability conversion and single-choice renormalization."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from nwloot.model import AnalyzedLootItem

__all__ = ["roll_to_probability", "renormalize_for_single_choice", "renormalize_entry_groups"]


def roll_to_probability(max_roll: float, threshold: float) -> float:
    """Convert an item roll threshold into a probability in [0, 1].

    The threshold is the minimum roll needed, so a higher threshold is rarer.
    Tables without a roll range only grant items with threshold 0.
    """
    if max_roll > 0:
        if threshold > max_roll:
            return 0.0
        return 1.0 - (threshold / max_roll)
    return 1.0 if threshold == 0 else 0.0


def renormalize_entry_groups(groups: Sequence[Sequence[AnalyzedLootItem]]) -> List[AnalyzedLootItem]:
    """Renormalize a single-choice table whose entries expanded into leaf groups.

    `groups` holds, per table entry, the leaves that entry resolved to (one
    leaf for a plain item, several for a referenced table or bucket). Exactly
    one entry is chosen, so every leaf is divided by the number of entries
    that can be chosen at all (any non-zero leaf). With no such entry
    everything stays at zero. Returns the flattened leaves.
    """
    possible = sum(1 for group in groups if any(item.probability > 0 for item in group))
    if possible == 0:
        return [replace(item, probability=0.0) for group in groups for item in group]
    return [replace(item, probability=item.probability / possible) for group in groups for item in group]


def renormalize_for_single_choice(items: Sequence[AnalyzedLootItem]) -> List[AnalyzedLootItem]:
    """Scale probabilities for tables where exactly one of `items` is chosen.

    Each probability is divided by the number of items that can be chosen at
    all (non-zero probability). With no such item everything stays at zero.
    """
    return renormalize_entry_groups([[item] for item in items])
