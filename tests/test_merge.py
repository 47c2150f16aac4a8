"""
Tests for duplicate merging.
"""

import pytest

from nwloot.merge import merge_duplicates, merge_items
from nwloot.model import AnalyzedLootItem, Conditions, Levels, NumberRange


def _leaf(name, probability, quantity=(1, 1), gear_score=None, **kwargs):
    return AnalyzedLootItem(
        name=name,
        quantity=NumberRange(*quantity),
        probability=probability,
        gear_score=NumberRange(*gear_score) if gear_score else None,
        **kwargs,
    )


class TestMergeItems:
    def test_probabilities_add_and_ranges_widen(self):
        merged = merge_items(
            _leaf("Ore", 0.2, quantity=(1, 2), gear_score=(100, 200)),
            _leaf("Ore", 0.3, quantity=(3, 5), gear_score=(150, 300)),
        )
        assert merged.probability == pytest.approx(0.5)
        assert merged.quantity == NumberRange(1, 5)
        assert merged.gear_score == NumberRange(100, 300)

    def test_missing_gear_score_stays_unset(self):
        merged = merge_items(_leaf("Ore", 0.1, gear_score=(100, 200)), _leaf("Ore", 0.1))
        assert merged.gear_score is None

    def test_perk_overrides_prefer_target(self):
        merged = merge_items(
            _leaf("Ore", 0.1, perk_overrides=None, perk_bucket_overrides="BucketA"),
            _leaf("Ore", 0.1, perk_overrides="PerkB", perk_bucket_overrides="BucketB"),
        )
        assert merged.perk_bucket_overrides == "BucketA"
        assert merged.perk_overrides == "PerkB"

    def test_conditions_merge(self):
        merged = merge_items(
            _leaf("Ore", 0.1, conditions=Conditions(elite=True, levels=Levels(content=NumberRange(10, 20)))),
            _leaf("Ore", 0.1, conditions=Conditions(elite=True, levels=Levels(content=NumberRange(30, 40)))),
        )
        assert merged.conditions.elite is True
        assert merged.conditions.levels.content == NumberRange(10, 40)

    def test_inputs_are_untouched(self):
        a, b = _leaf("Ore", 0.2), _leaf("Ore", 0.3)
        merge_items(a, b)
        assert (a.probability, b.probability) == (0.2, 0.3)


class TestMergeDuplicates:
    def test_no_merge_without_context_or_force(self):
        items = [_leaf("A", 0.1), _leaf("A", 0.2)]
        assert [i.probability for i in merge_duplicates(items)] == [0.1, 0.2]

    def test_force_merging(self):
        items = [_leaf("A", 0.1), _leaf("B", 0.5), _leaf("A", 0.2)]
        merged = merge_duplicates(items, force_merging=True)
        assert [i.name for i in merged] == ["A", "B"]
        assert merged[0].probability == pytest.approx(0.3)

    def test_context_enables_merging(self):
        items = [_leaf("A", 0.1), _leaf("A", 0.2), _leaf("A", 0.3)]
        merged = merge_duplicates(items, has_context=True)
        assert len(merged) == 1
        assert merged[0].probability == pytest.approx(0.6)

    def test_merging_twice_changes_nothing(self):
        items = [_leaf("A", 0.1, quantity=(1, 2)), _leaf("B", 0.5), _leaf("A", 0.2, quantity=(2, 4))]
        once = merge_duplicates(items, force_merging=True)
        twice = merge_duplicates(once, force_merging=True)
        assert [i.name for i in twice] == [i.name for i in once] == ["A", "B"]
        assert [i.probability for i in twice] == [i.probability for i in once]
        assert twice[0].probability == pytest.approx(0.3)
        assert twice[0].quantity == NumberRange(1, 4)

    def test_names_unique_after_merge(self):
        items = [_leaf(n, 0.1) for n in ["A", "B", "A", "C", "B"]]
        names = [i.name for i in merge_duplicates(items, force_merging=True)]
        assert names == ["A", "B", "C"]

    def test_empty(self):
        assert merge_duplicates([], force_merging=True) == []
