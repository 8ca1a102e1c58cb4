"""Simple array exercises."""

from __future__ import annotations

from typing import Iterable, Sequence

_SCALE = list(range(1, 9))


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and largest of ``values``."""
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    return min(items), max(items)


def classify_scale(notes: Sequence[int]) -> str:
    """Classify eight notes as ``ascending``, ``descending`` or ``mixed``."""
    notes = list(notes)
    if len(notes) != len(_SCALE):
        raise ValueError("exactly eight notes are expected")
    if notes == _SCALE:
        return "ascending"
    if notes == _SCALE[::-1]:
        return "descending"
    return "mixed"


def above_average_ratio(scores: Sequence[float]) -> float:
    """Return the percentage of scores strictly above their mean."""
    scores = list(scores)
    if not scores:
        raise ValueError("scores must not be empty")
    average = sum(scores) / len(scores)
    above = sum(1 for score in scores if score > average)
    return above / len(scores) * 100