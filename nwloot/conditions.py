# -*- coding: utf-8 -*-
"""Condition evaluation against a run-time probability context.

Design notes
- A check only fails when both the context value and the expected value are
  known and disagree. Missing information on either side never restricts.
- Expected values are `Scalar` (equality) or `NumberRange` (inclusive bounds).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

from nwloot.model import Conditions, Levels, NumberRange

__all__ = [
    "LocationContext",
    "EnemyContext",
    "ProbabilityContext",
    "Scalar",
    "is_eligible",
    "merge_conditions",
    "widen_range",
]


@dataclass(frozen=True)
class LocationContext:
    name: Optional[str] = None
    type: Optional[str] = None
    level: Optional[int] = None


@dataclass(frozen=True)
class EnemyContext:
    name: Optional[str] = None
    type: Optional[str] = None
    level: Optional[int] = None
    elite: Optional[bool] = None


@dataclass(frozen=True)
class ProbabilityContext:
    """Facts used to filter eligible loot.

    Setting `location` or `enemy` at all (even without any field) enables the
    evaluation of named conditions.
    """

    location: Optional[LocationContext] = None
    enemy: Optional[EnemyContext] = None
    salt: Optional[bool] = None
    character_level: Optional[int] = None

    def is_empty(self) -> bool:
        return (
            self.location is None
            and self.enemy is None
            and self.salt is None
            and self.character_level is None
        )

    @property
    def has_named_scope(self) -> bool:
        return self.location is not None or self.enemy is not None

    def name_candidates(self) -> List[str]:
        enemy = self.enemy or EnemyContext()
        location = self.location or LocationContext()
        names = (enemy.name, enemy.type, location.name, location.type)
        return [n for n in names if n is not None]


@dataclass(frozen=True)
class Scalar:
    value: Any

    def matches(self, value: Any) -> bool:
        return value == self.value


Expected = Union[Scalar, NumberRange]


def _scalar(value: Any) -> Optional[Scalar]:
    return None if value is None else Scalar(value)


def _failed(actual: Any, expected: Optional[Expected]) -> bool:
    if actual is None or expected is None:
        return False
    return not expected.matches(actual)


def _checks(conditions: Conditions, context: ProbabilityContext) -> Tuple[Tuple[Any, Optional[Expected]], ...]:
    enemy = context.enemy or EnemyContext()
    location = context.location or LocationContext()
    levels = conditions.levels
    return (
        (enemy.elite, _scalar(conditions.elite)),
        (context.salt, _scalar(conditions.salt)),
        (context.character_level, levels.character),
        (location.level, levels.content),
        (enemy.level, levels.enemy),
    )


def is_eligible(conditions: Conditions, context: ProbabilityContext) -> bool:
    if any(_failed(actual, expected) for actual, expected in _checks(conditions, context)):
        return False

    if not context.has_named_scope:
        return True

    # each context name can satisfy one tag only
    candidates = context.name_candidates()
    for tag in conditions.named:
        if tag not in candidates:
            return False
        candidates.remove(tag)
    return True


# ============================================================
# Merging
# ============================================================


def widen_range(a: Optional[NumberRange], b: Optional[NumberRange]) -> Optional[NumberRange]:
    """Smallest range covering both. An unset side stays unset (unbounded)."""
    if a is None or b is None:
        return None
    return NumberRange(min(a.low, b.low), max(a.high, b.high))


def _agree(a: Optional[bool], b: Optional[bool]) -> Optional[bool]:
    return a if a == b else None


def merge_conditions(target: Conditions, source: Conditions) -> Conditions:
    return Conditions(
        elite=_agree(target.elite, source.elite),
        salt=_agree(target.salt, source.salt),
        global_mod=_agree(target.global_mod, source.global_mod),
        levels=Levels(
            character=widen_range(target.levels.character, source.levels.character),
            content=widen_range(target.levels.content, source.levels.content),
            enemy=widen_range(target.levels.enemy, source.levels.enemy),
        ),
        named=list(target.named) + list(source.named),
    )
