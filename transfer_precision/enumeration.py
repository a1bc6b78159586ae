# transfer_precision/enumeration.py
"""Exhaustive enumeration of abstract ranges for one bit width."""
from __future__ import annotations

from typing import Iterator, List

from loguru import logger

from transfer_precision.bitwidth import BitWidth, as_bitwidth
from transfer_precision.constant_range import ConstantRange

# Enumeration is quadratic in 2^w; past this width it gets slow.
WIDE_BITWIDTH_WARNING = 10


def iter_abstract_values(bitwidth: BitWidth | int) -> Iterator[ConstantRange]:
    """
    Yield [low, high + 1) for every signed_min <= low <= high < signed_max,
    then the empty range once.
    """
    width = as_bitwidth(bitwidth)
    for low in range(width.signed_min, width.signed_max):
        for high in range(low, width.signed_max):
            yield ConstantRange(width, low, high + 1)
    yield ConstantRange.empty(width)


def enumerate_abstract_values(bitwidth: BitWidth | int) -> List[ConstantRange]:
    """All abstract values of the width as a fresh list."""
    width = as_bitwidth(bitwidth)
    if width.bits > WIDE_BITWIDTH_WARNING:
        logger.warning(
            f"Enumerating {expected_count(width)} ranges for {width}, this may take a while"
        )
    return list(iter_abstract_values(width))


def expected_count(bitwidth: BitWidth | int) -> int:
    """C(2^w, 2) + 1: one range per low <= high pair, plus the empty one."""
    n = as_bitwidth(bitwidth).modulus
    return n * (n - 1) // 2 + 1
