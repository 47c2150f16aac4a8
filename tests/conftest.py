"""
Pytest fixtures for the nwloot test suite.

Provides raw datasheet rows (as the remote JSON exports look) and a small
parsed loot data set with nested table and bucket references.
"""

import json

import pytest

from nwloot.model import Conditions, NumberRange
from tests.helpers import make_bucket, make_item, make_loot, make_table


# =============================================================================
# RAW DATASHEETS
# =============================================================================


TABLE_ROWS = [
    {
        "LootTableID": "CreatureLoot",
        "AND/OR": "AND",
        "HWMMult": 1.5,
        "GSBonus": 10,
        "UseLevelGS": "TRUE",
        "LuckSafe": "FALSE",
        "Conditions": "",
        "Item1": "[LTID]Gems",
        "Item2": "[LBID]Hides",
        "Item3": "Coin",
        "GearScoreRange3": "100-150",
        "PerkOverrides3": "PerkID_Luck",
    },
    {"LootTableID": "CreatureLoot_Qty", "Item1": "1", "Item2": "2-3", "Item3": "5-10"},
    {"LootTableID": "CreatureLoot_Probs", "MaxRoll": 100000, "Item1": "0", "Item2": "50000", "Item3": "90000"},
    {
        "LootTableID": "Gems",
        "Conditions": "Elite,Ancient",
        "Item1": "GemRuby",
        "Item2": "GemOpal",
    },
    {"LootTableID": "Gems_Qty", "Item1": 1, "Item2": 1},
    {"LootTableID": "Gems_Probs", "MaxRoll": 0, "Item1": "0", "Item2": "0"},
    {
        "LootTableID": "LevelGated",
        "AND/OR": "AND",
        "Conditions": "Level",
        "Item1": "StarterSword",
        "Item2": "EndgameSword",
    },
    {"LootTableID": "LevelGated_Qty", "Item1": "1", "Item2": "1"},
    {"LootTableID": "LevelGated_Probs", "MaxRoll": 0, "Item1": "1", "Item2": "60"},
    {"LootTableID": "Orphan_Qty", "Item1": "1"},
]

BUCKET_ROWS = [
    {
        "RowPlaceholders": "FIRSTROW",
        "LootBucket1": "Hides",
        "MatchOne1": "FALSE",
        "LootBucket2": "Fish",
        "MatchOne2": "TRUE",
    },
    {
        "RowPlaceholders": "",
        "Item1": "RawHide",
        "Quantity1": "1",
        "Tags1": "MinContLevel:10",
        "Item2": "Trout",
        "Quantity2": "1-2",
        "Tags2": "Level:5-20, Lake",
    },
    {
        "RowPlaceholders": "",
        "Item1": "ThickHide",
        "Quantity1": 2,
        "Tags1": "",
        "Item2": "",
        "Quantity2": 0,
    },
]


@pytest.fixture
def table_rows():
    return json.loads(json.dumps(TABLE_ROWS))


@pytest.fixture
def bucket_rows():
    return json.loads(json.dumps(BUCKET_ROWS))


@pytest.fixture
def datasheet_dir(tmp_path):
    """Data directory holding both datasheets under their default names."""
    (tmp_path / "javelindata_loottables.json").write_text(json.dumps(TABLE_ROWS), encoding="utf-8")
    (tmp_path / "javelindata_lootbuckets.json").write_text(json.dumps(BUCKET_ROWS), encoding="utf-8")
    return tmp_path


# =============================================================================
# PARSED DATA SETS
# =============================================================================


@pytest.fixture
def nested_loot():
    """Top table -> OR sub-table -> literal items, plus a split bucket."""
    sub = make_table(
        "Sub",
        [
            make_item("Iron", probability=0, quantity=(2, 2)),
            make_item("Silver", probability=0, quantity=(1, 3)),
        ],
    )
    top = make_table(
        "Top",
        [
            make_item("[LTID]Sub", probability=50, quantity=(2, 2)),
            make_item("[LBID]Herbs", probability=0),
            make_item("Gold", probability=75),
        ],
        and_or="AND",
    )
    herbs = make_bucket("Herbs", ["Hyssop", "Rivercress"], match_one=False)
    return make_loot([top, sub], [herbs])


@pytest.fixture
def elite_conditions():
    return Conditions(elite=True)


@pytest.fixture
def level_conditions():
    conditions = Conditions()
    conditions.levels.character = NumberRange(10, 20)
    return conditions
