# -*- coding: utf-8 -*-
"""Display helpers shared by the HTML and console renderers."""

from __future__ import annotations

from typing import List, Optional

from nwloot.model import Conditions, NumberRange

__all__ = ["format_range", "format_probability", "format_level", "describe_conditions"]


def _num(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def format_range(rng: Optional[NumberRange]) -> str:
    if rng is None:
        return ""
    if rng.low == rng.high:
        return _num(rng.low)
    return f"{_num(rng.low)}-{_num(rng.high)}"


def format_probability(probability: Optional[float]) -> str:
    if not probability:
        return "0.000%"
    return f"{probability * 100:.3f}%"


def format_level(rng: NumberRange) -> str:
    if rng.open_ended:
        return f"{_num(rng.low)}+"
    return format_range(rng)


def describe_conditions(conditions: Conditions) -> List[str]:
    """Short prose fragments, e.g. ["elite only", "character level 20+"]."""
    parts: List[str] = []
    if conditions.elite is not None:
        parts.append("elite only" if conditions.elite else "common only")
    if conditions.salt is not None:
        parts.append("salt water" if conditions.salt else "fresh water")
    if conditions.global_mod:
        parts.append("global modifier")
    levels = conditions.levels
    for label, rng in (("character", levels.character), ("content", levels.content), ("enemy", levels.enemy)):
        if rng is not None:
            parts.append(f"{label} level {format_level(rng)}")
    if conditions.named:
        parts.append("named: " + ", ".join(conditions.named))
    return parts
