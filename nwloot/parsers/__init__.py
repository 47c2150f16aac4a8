# -*- coding: utf-8 -*-
"""Datasheet parsers (spreadsheet-shaped JSON -> typed loot records)."""

from nwloot.parsers.base import BaseParser, parse_boolean, parse_list, parse_range
from nwloot.parsers.loot import (
    LootBucketParser,
    LootTableParser,
    parse_bucket_tags,
    parse_loot,
    parse_table_conditions,
)

__all__ = [
    "BaseParser",
    "LootBucketParser",
    "LootTableParser",
    "parse_boolean",
    "parse_bucket_tags",
    "parse_list",
    "parse_loot",
    "parse_range",
    "parse_table_conditions",
]
