# transfer_precision/precision.py
"""
Precision order between two results for the same input.

A range counts as more precise than another when it strictly contains it;
the empty range is more precise than any non-empty one. This is a partial
order, so two results can also be incomparable.
"""
from __future__ import annotations

from enum import Enum

from transfer_precision.constant_range import ConstantRange


class Outcome(Enum):
    """How the composite and decomposed results relate."""
    COMPOSITE = "composite more precise"
    DECOMPOSED = "decomposed more precise"
    INCOMPARABLE = "incomparable"
    IDENTICAL = "identical"


def is_more_precise(a: ConstantRange, b: ConstantRange) -> bool:
    """Never true for both (a, b) and (b, a)."""
    if a.is_empty_set() and not b.is_empty_set():
        return True
    if not a.is_empty_set() and b.is_empty_set():
        return False
    return a.contains(b) and not b.contains(a)


def classify(composite: ConstantRange, decomposed: ConstantRange) -> Outcome:
    if is_more_precise(composite, decomposed):
        return Outcome.COMPOSITE
    if is_more_precise(decomposed, composite):
        return Outcome.DECOMPOSED
    # Containment, not is_more_precise: equal results must not land here.
    if not composite.contains(decomposed) and not decomposed.contains(composite):
        return Outcome.INCOMPARABLE
    return Outcome.IDENTICAL
