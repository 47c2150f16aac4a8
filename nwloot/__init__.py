# -*- coding: utf-8 -*-
"""nwloot: resolve New World loot tables into drop probabilities."""

from nwloot.analyzer import AnalyzerSettings, LootAnalyzer
from nwloot.conditions import EnemyContext, LocationContext, ProbabilityContext
from nwloot.diagnostics import Diagnostic, DiagnosticKind
from nwloot.model import (
    AnalyzedLootItem,
    AnalyzedLootTable,
    Conditions,
    Levels,
    Loot,
    LootBucket,
    LootBucketItem,
    LootTable,
    LootTableItem,
    NumberRange,
)

__version__ = "0.3.0"

__all__ = [
    "AnalyzedLootItem",
    "AnalyzedLootTable",
    "AnalyzerSettings",
    "Conditions",
    "Diagnostic",
    "DiagnosticKind",
    "EnemyContext",
    "Levels",
    "LocationContext",
    "Loot",
    "LootAnalyzer",
    "LootBucket",
    "LootBucketItem",
    "LootTable",
    "LootTableItem",
    "NumberRange",
    "ProbabilityContext",
]
