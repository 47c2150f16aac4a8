# -*- coding: utf-8 -*-
"""Typed records for loot tables, loot buckets and analysis results.

Input records (`LootTable`, `LootBucket`, ...) are produced by the parser and
only read by the analysis pipeline. `AnalyzedLootItem` / `AnalyzedLootTable`
are created fresh on every analysis run.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

__all__ = [
    "MAX_LEVEL",
    "NumberRange",
    "Levels",
    "Conditions",
    "LootTableItem",
    "LootTable",
    "LootBucketItem",
    "LootBucket",
    "Loot",
    "AnalyzedLootItem",
    "AnalyzedLootTable",
]

# Open-ended upper bound ("level 30 and above").
MAX_LEVEL = sys.maxsize


@dataclass(frozen=True)
class NumberRange:
    """Inclusive numeric interval."""

    low: float
    high: float

    @classmethod
    def single(cls, value: float) -> "NumberRange":
        return cls(value, value)

    @classmethod
    def at_least(cls, value: float) -> "NumberRange":
        return cls(value, MAX_LEVEL)

    @property
    def open_ended(self) -> bool:
        return self.high >= MAX_LEVEL

    def matches(self, value: Any) -> bool:
        return self.low <= value <= self.high

    def __mul__(self, other: Any) -> "NumberRange":
        if isinstance(other, NumberRange):
            return NumberRange(self.low * other.low, self.high * other.high)
        return NumberRange(self.low * other, self.high * other)

    __rmul__ = __mul__

    def to_dict(self) -> Dict[str, Any]:
        return {"Low": self.low, "High": self.high}


@dataclass
class Levels:
    character: Optional[NumberRange] = None
    content: Optional[NumberRange] = None
    enemy: Optional[NumberRange] = None

    def copy(self) -> "Levels":
        return Levels(self.character, self.content, self.enemy)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for key, rng in (("Character", self.character), ("Content", self.content), ("Enemy", self.enemy)):
            if rng is not None:
                out[key] = rng.to_dict()
        return out


@dataclass
class Conditions:
    """Eligibility predicates attached to an item.

    `None` on any flag means "not restricted". `named` lists location or enemy
    tags; each one must match a distinct name of the supplied context.
    """

    elite: Optional[bool] = None
    salt: Optional[bool] = None
    global_mod: Optional[bool] = None
    levels: Levels = field(default_factory=Levels)
    named: List[str] = field(default_factory=list)

    def copy(self) -> "Conditions":
        return Conditions(
            elite=self.elite,
            salt=self.salt,
            global_mod=self.global_mod,
            levels=self.levels.copy(),
            named=list(self.named),
        )

    @property
    def unrestricted(self) -> bool:
        return (
            self.elite is None
            and self.salt is None
            and self.global_mod is None
            and not self.levels.to_dict()
            and not self.named
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"Levels": self.levels.to_dict(), "Named": list(self.named)}
        if self.elite is not None:
            out["Elite"] = self.elite
        if self.salt is not None:
            out["Fishing"] = {"Salt": self.salt}
        if self.global_mod is not None:
            out["GlobalMod"] = self.global_mod
        return out


@dataclass
class LootTableItem:
    name: str
    quantity: NumberRange = field(default_factory=lambda: NumberRange(0, 0))
    probability: int = 0
    gear_score: Optional[NumberRange] = None
    perk_bucket_overrides: Optional[str] = None
    perk_overrides: Optional[str] = None
    conditions: Conditions = field(default_factory=Conditions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "GearScore": self.gear_score.to_dict() if self.gear_score else None,
            "Quantity": self.quantity.to_dict(),
            "Probability": self.probability,
            "PerkBucketOverrides": self.perk_bucket_overrides,
            "PerkOverrides": self.perk_overrides,
            "Conditions": self.conditions.to_dict(),
        }


@dataclass
class LootTable:
    loot_table_id: str
    and_or: Optional[str] = None
    high_water_mark_multiplier: float = 0
    gear_score_bonus: float = 0
    max_roll: int = 0
    items: List[LootTableItem] = field(default_factory=list)
    use_level_gear_score: bool = False
    luck_safe: bool = False

    @property
    def multiple(self) -> bool:
        """True when several items can drop; otherwise exactly one is chosen."""
        return self.and_or == "AND"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "LootTableID": self.loot_table_id,
            "AndOr": self.and_or,
            "HighWaterMarkMultiplier": self.high_water_mark_multiplier,
            "GearScoreBonus": self.gear_score_bonus,
            "MaxRoll": self.max_roll,
            "UseLevelGearScore": self.use_level_gear_score,
            "LuckSafe": self.luck_safe,
            "Items": [item.to_dict() for item in self.items],
        }


@dataclass
class LootBucketItem:
    name: str
    quantity: NumberRange = field(default_factory=lambda: NumberRange(1, 1))
    conditions: Conditions = field(default_factory=Conditions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "Quantity": self.quantity.to_dict(),
            "Conditions": self.conditions.to_dict(),
        }


@dataclass
class LootBucket:
    name: str
    match_one: bool = False
    items: List[LootBucketItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "MatchOne": self.match_one,
            "Items": [item.to_dict() for item in self.items],
        }


@dataclass
class Loot:
    loot_tables: List[LootTable] = field(default_factory=list)
    loot_buckets: List[LootBucket] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lootTables": [t.to_dict() for t in self.loot_tables],
            "lootBuckets": [b.to_dict() for b in self.loot_buckets],
        }


@dataclass
class AnalyzedLootItem:
    name: str
    quantity: NumberRange
    probability: float
    gear_score: Optional[NumberRange] = None
    perk_bucket_overrides: Optional[str] = None
    perk_overrides: Optional[str] = None
    conditions: Conditions = field(default_factory=Conditions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "GearScore": self.gear_score.to_dict() if self.gear_score else None,
            "Quantity": self.quantity.to_dict() if self.quantity else None,
            "Probability": self.probability,
            "PerkBucketOverrides": self.perk_bucket_overrides,
            "PerkOverrides": self.perk_overrides,
            "Conditions": self.conditions.to_dict(),
        }


@dataclass
class AnalyzedLootTable:
    id: str
    multiple: bool
    high_water_mark_multiplier: float = 0
    use_level_gear_score: bool = False
    gear_score_bonus: float = 0
    luck_safe: bool = False
    items: List[AnalyzedLootItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Id": self.id,
            "Multiple": self.multiple,
            "HighWaterMarkMultiplier": self.high_water_mark_multiplier,
            "UseLevelGearScore": self.use_level_gear_score,
            "GearScoreBonus": self.gear_score_bonus,
            "LuckSafe": self.luck_safe,
            "Items": [item.to_dict() for item in self.items],
        }
