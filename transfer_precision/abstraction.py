# transfer_precision/abstraction.py
"""
Moving between abstract ranges and the concrete values they stand for.

  concretize   γ: ConstantRange -> sorted list of members
  abstractize  α: set of members -> tightest enclosing ConstantRange

For every non-empty range that does not wrap, α(γ(r)) == r.
"""
from __future__ import annotations

from typing import Iterable, List

from transfer_precision.bitwidth import BitWidth, as_bitwidth
from transfer_precision.constant_range import ConstantRange


def concretize(value: ConstantRange) -> List[int]:
    """Every member of the range, ordered by signed value, without duplicates."""
    if value.is_empty_set():
        return []

    width = value.width
    if value.is_full_set():
        return list(range(width.signed_min, width.signed_max + 1))

    # Stepping is modular, so wrapped ranges end at upper as well.
    members = set()
    current = value.lower
    while current != value.upper:
        members.add(current)
        current = width.successor(current)
    return sorted(members)


def abstractize(values: Iterable[int], width: BitWidth | int) -> ConstantRange:
    """
    Tightest range holding every value.

    An empty input is the only way to get the empty range back.
    """
    w = as_bitwidth(width)
    members = {w.check(v) for v in values}
    if not members:
        return ConstantRange.empty(w)
    return enclosing_range(w, min(members), max(members))


def enclosing_range(width: BitWidth, smallest: int, largest: int) -> ConstantRange:
    """
    [smallest, largest + 1) with the exclusive bound taken modulo 2^w.

    largest == signed_max has no room for largest + 1, so the bound wraps
    to signed_min: {signed_max} becomes [signed_max, signed_min). If
    smallest is signed_min as well the bounds meet, which is the full set.
    """
    if smallest > largest:
        raise ValueError(f"Empty bounds {smallest} > {largest}")
    upper = width.wrap(largest + 1)
    if upper == smallest:
        return ConstantRange.full(width)
    return ConstantRange(width, smallest, upper)
