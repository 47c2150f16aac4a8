# -*- coding: utf-8 -*-
"""Loot table + loot bucket datasheet parsers.

Loot tables are split across three rows sharing a base id:
- `XXX`        main row: flags, conditions, item names, gear score, perks
- `XXX_Qty`    item quantities
- `XXX_Probs`  MaxRoll + item roll thresholds

Loot buckets are stored column-wise: the `FIRSTROW` row declares every bucket
(`LootBucket{i}`, `MatchOne{i}`), each row then adds one item to bucket `i`
through `Item{i}` / `Quantity{i}` / `Tags{i}`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from nwloot.model import Conditions, Loot, LootBucket, LootBucketItem, LootTable, LootTableItem, NumberRange
from nwloot.parsers.base import BaseParser, Row, parse_boolean, parse_list, parse_range

__all__ = ["LootTableParser", "LootBucketParser", "parse_loot", "parse_table_conditions", "parse_bucket_tags"]

logger = logging.getLogger(__name__)

QTY_SUFFIX = "_Qty"
PROBS_SUFFIX = "_Probs"

# Bucket columns seen in practice stay far below this.
ROW_ITEMS_BOUND = 1000

# Table conditions turning the _Probs value into a minimum level.
LEVEL_CONDITIONS = ("Level", "EnemyLevel", "MinPOIContLevel")
IGNORED_CONDITIONS = ("Named", "FishRarity", "FishSize")


def parse_table_conditions(raw: Optional[str]) -> Tuple[Conditions, Optional[str]]:
    """Parse a table `Conditions` cell.

    Returns the conditions and, if present, the level condition that the
    `_Probs` row values encode instead of roll thresholds.
    """
    conditions = Conditions()
    level_type: Optional[str] = None
    for cond in parse_list(raw):
        if cond in LEVEL_CONDITIONS:
            level_type = cond
        elif cond in ("Elite", "Common"):
            conditions.elite = cond == "Elite"
        elif cond == "GlobalMod":
            conditions.global_mod = True
        elif cond in ("Salt", "Fresh"):
            conditions.salt = cond == "Salt"
        elif cond in IGNORED_CONDITIONS:
            continue
        else:
            conditions.named.append(cond)
    return conditions, level_type


def _level_range(value: str) -> NumberRange:
    if "-" in value:
        return parse_range(value)
    return NumberRange.at_least(int(float(value)))


def parse_bucket_tags(tags: List[str]) -> Conditions:
    conditions = Conditions()
    for tag in tags:
        name, _, value = tag.partition(":")
        if name == "MinContLevel" and value:
            conditions.levels.content = _level_range(value)
        elif name == "Level" and value:
            conditions.levels.character = _level_range(value)
        else:
            conditions.named.append(tag)
    return conditions


class LootTableParser(BaseParser):
    """Parse the loot tables datasheet into `LootTable` records."""

    def parse(self) -> List[LootTable]:
        tables: Dict[str, LootTable] = {}
        level_types: Dict[str, Optional[str]] = {}

        for row in self.rows:
            table_id = str(row.get("LootTableID") or "")
            if not table_id:
                continue
            if table_id.endswith(QTY_SUFFIX):
                base = table_id[: -len(QTY_SUFFIX)]
                self._parse_quantity_row(tables.get(base), row)
            elif table_id.endswith(PROBS_SUFFIX):
                base = table_id[: -len(PROBS_SUFFIX)]
                self._parse_probability_row(tables.get(base), row, level_types.get(base))
            else:
                table, level_type = self._parse_main_row(row)
                tables[table_id] = table
                level_types[table_id] = level_type

        logger.debug("Parsed %d loot tables", len(tables))
        return list(tables.values())

    def _parse_main_row(self, row: Row) -> Tuple[LootTable, Optional[str]]:
        conditions, level_type = parse_table_conditions(row.get("Conditions"))
        table = LootTable(
            loot_table_id=str(row["LootTableID"]),
            and_or=row.get("AND/OR") or None,
            high_water_mark_multiplier=row.get("HWMMult") or 0,
            gear_score_bonus=row.get("GSBonus") or 0,
            use_level_gear_score=parse_boolean(row.get("UseLevelGS")),
            luck_safe=parse_boolean(row.get("LuckSafe")),
        )
        for i, name in self._indexed(row, "Item"):
            gs_raw = row.get(f"GearScoreRange{i}")
            table.items.append(
                LootTableItem(
                    name=str(name),
                    gear_score=parse_range(gs_raw) if gs_raw else None,
                    perk_bucket_overrides=row.get(f"PerkBucketOverrides{i}") or None,
                    perk_overrides=row.get(f"PerkOverrides{i}") or None,
                    conditions=conditions.copy(),
                )
            )
        return table, level_type

    def _amended_items(self, table: Optional[LootTable], row: Row):
        """Yield (item, raw value) pairs of an amending row."""
        if table is None:
            logger.warning("Main table for loot table %s not found", row.get("LootTableID"))
            return
        for i, item in enumerate(table.items, start=1):
            raw = row.get(f"Item{i}")
            if raw is None or raw == "":
                continue
            yield item, raw

    def _parse_quantity_row(self, table: Optional[LootTable], row: Row) -> None:
        for item, raw in self._amended_items(table, row):
            item.quantity = parse_range(raw)

    def _parse_probability_row(self, table: Optional[LootTable], row: Row, level_type: Optional[str]) -> None:
        if table is not None:
            table.max_roll = int(row.get("MaxRoll") or 0)
        for item, raw in self._amended_items(table, row):
            value = int(float(raw))
            if level_type is None:
                item.probability = value
                continue
            # value is a minimum level, the item itself is always rolled
            item.probability = 0
            levels = item.conditions.levels
            if level_type == "Level":
                levels.character = NumberRange.at_least(value)
            elif level_type == "EnemyLevel":
                levels.enemy = NumberRange.at_least(value)
            else:
                levels.content = NumberRange.at_least(value)


class LootBucketParser(BaseParser):
    """Parse the loot buckets datasheet into `LootBucket` records."""

    def parse(self) -> List[LootBucket]:
        buckets: List[LootBucket] = []
        for row in self.rows:
            if row.get("RowPlaceholders") == "FIRSTROW":
                buckets = self._parse_definitions(row)
                break

        for row in self.rows:
            for i, bucket in enumerate(buckets, start=1):
                qty = row.get(f"Quantity{i}")
                if not qty:
                    continue
                bucket.items.append(
                    LootBucketItem(
                        name=str(row.get(f"Item{i}") or ""),
                        quantity=parse_range(qty),
                        conditions=parse_bucket_tags(parse_list(row.get(f"Tags{i}"))),
                    )
                )

        logger.debug("Parsed %d loot buckets", len(buckets))
        return buckets

    def _parse_definitions(self, row: Row) -> List[LootBucket]:
        buckets: List[LootBucket] = []
        for i, name in self._indexed(row, "LootBucket"):
            if i > ROW_ITEMS_BOUND:
                logger.warning("Detected bounds violation, did data file structure change?")
                break
            buckets.append(LootBucket(name=str(name), match_one=parse_boolean(row.get(f"MatchOne{i}"))))
        return buckets


def parse_loot(tables_file: Union[str, Path], buckets_file: Optional[Union[str, Path]] = None) -> Loot:
    loot = Loot(loot_tables=LootTableParser.from_file(tables_file).parse())
    if buckets_file is not None:
        loot.loot_buckets = LootBucketParser.from_file(buckets_file).parse()
    return loot
