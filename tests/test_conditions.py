"""
Tests for condition evaluation and condition merging.
"""

from nwloot.conditions import (
    EnemyContext,
    LocationContext,
    ProbabilityContext,
    Scalar,
    is_eligible,
    merge_conditions,
    widen_range,
)
from nwloot.model import MAX_LEVEL, Conditions, Levels, NumberRange


class TestExpectedValues:
    def test_scalar_uses_equality(self):
        assert Scalar(True).matches(True)
        assert not Scalar(True).matches(False)

    def test_range_is_inclusive(self):
        rng = NumberRange(10, 20)
        assert rng.matches(10)
        assert rng.matches(20)
        assert not rng.matches(9)
        assert not rng.matches(21)

    def test_open_ended_range(self):
        rng = NumberRange.at_least(30)
        assert rng.open_ended
        assert rng.matches(65)
        assert rng.high == MAX_LEVEL


class TestIsEligible:
    def test_empty_context_accepts_everything(self, elite_conditions, level_conditions):
        ctx = ProbabilityContext()
        assert is_eligible(elite_conditions, ctx)
        assert is_eligible(level_conditions, ctx)
        assert is_eligible(Conditions(named=["Ancient"]), ctx)

    def test_elite_flag_mismatch_fails(self, elite_conditions):
        ctx = ProbabilityContext(enemy=EnemyContext(elite=False))
        assert not is_eligible(elite_conditions, ctx)

    def test_elite_flag_match_passes(self, elite_conditions):
        ctx = ProbabilityContext(enemy=EnemyContext(elite=True))
        assert is_eligible(elite_conditions, ctx)

    def test_unset_condition_does_not_restrict(self):
        ctx = ProbabilityContext(enemy=EnemyContext(elite=True), salt=True, character_level=3)
        assert is_eligible(Conditions(), ctx)

    def test_salt_water(self):
        fresh_only = Conditions(salt=False)
        assert not is_eligible(fresh_only, ProbabilityContext(salt=True))
        assert is_eligible(fresh_only, ProbabilityContext(salt=False))

    def test_character_level_range(self, level_conditions):
        assert is_eligible(level_conditions, ProbabilityContext(character_level=15))
        assert not is_eligible(level_conditions, ProbabilityContext(character_level=25))

    def test_content_and_enemy_levels(self):
        conditions = Conditions(levels=Levels(content=NumberRange.at_least(30), enemy=NumberRange(1, 10)))
        assert is_eligible(conditions, ProbabilityContext(location=LocationContext(level=40)))
        assert not is_eligible(conditions, ProbabilityContext(location=LocationContext(level=20)))
        assert not is_eligible(conditions, ProbabilityContext(enemy=EnemyContext(level=11)))

    def test_named_tags_need_matching_context_names(self):
        conditions = Conditions(named=["Ancient"])
        assert is_eligible(conditions, ProbabilityContext(enemy=EnemyContext(type="Ancient")))
        assert not is_eligible(conditions, ProbabilityContext(enemy=EnemyContext(type="Corrupted")))

    def test_empty_named_scope_still_evaluates_tags(self):
        # enemy given without any detail: named items are not eligible
        conditions = Conditions(named=["Ancient"])
        assert not is_eligible(conditions, ProbabilityContext(enemy=EnemyContext()))
        assert is_eligible(Conditions(), ProbabilityContext(enemy=EnemyContext()))

    def test_each_context_name_matches_one_tag(self):
        ctx = ProbabilityContext(enemy=EnemyContext(type="Ancient"))
        assert not is_eligible(Conditions(named=["Ancient", "Ancient"]), ctx)
        ctx = ProbabilityContext(
            enemy=EnemyContext(type="Ancient"),
            location=LocationContext(name="Ancient"),
        )
        assert is_eligible(Conditions(named=["Ancient", "Ancient"]), ctx)

    def test_all_tags_must_match(self):
        ctx = ProbabilityContext(
            enemy=EnemyContext(name="Isabella"),
            location=LocationContext(type="Dungeon"),
        )
        assert is_eligible(Conditions(named=["Isabella", "Dungeon"]), ctx)
        assert not is_eligible(Conditions(named=["Isabella", "Outpost"]), ctx)

    def test_named_tags_ignored_without_location_or_enemy(self):
        ctx = ProbabilityContext(character_level=60)
        assert is_eligible(Conditions(named=["Ancient"]), ctx)

    def test_context_is_empty(self):
        assert ProbabilityContext().is_empty()
        assert not ProbabilityContext(enemy=EnemyContext()).is_empty()
        assert not ProbabilityContext(salt=False).is_empty()


class TestMergeConditions:
    def test_disagreeing_flags_become_unrestricted(self):
        merged = merge_conditions(Conditions(elite=True, salt=True), Conditions(elite=False, salt=True))
        assert merged.elite is None
        assert merged.salt is True

    def test_levels_widen(self):
        a = Conditions(levels=Levels(character=NumberRange(10, 20)))
        b = Conditions(levels=Levels(character=NumberRange(15, 30)))
        assert merge_conditions(a, b).levels.character == NumberRange(10, 30)

    def test_unset_level_swallows_bounded(self):
        a = Conditions(levels=Levels(enemy=NumberRange(10, 20)))
        assert merge_conditions(a, Conditions()).levels.enemy is None

    def test_named_concatenate(self):
        merged = merge_conditions(Conditions(named=["A"]), Conditions(named=["A", "B"]))
        assert merged.named == ["A", "A", "B"]

    def test_widen_range(self):
        assert widen_range(NumberRange(1, 2), NumberRange(0, 5)) == NumberRange(0, 5)
        assert widen_range(None, NumberRange(0, 5)) is None
