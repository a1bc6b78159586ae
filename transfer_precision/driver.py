# transfer_precision/driver.py
"""
Comparison driver.

Runs a composite and a decomposed transfer function over every abstract
value of a bit width and tallies which one was more precise.
"""
from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from transfer_precision.bitwidth import BitWidth, as_bitwidth
from transfer_precision.constant_range import ConstantRange
from transfer_precision.enumeration import enumerate_abstract_values
from transfer_precision.precision import Outcome, classify
from transfer_precision.transfer import TransferFunction


@dataclass
class ComparisonResult:
    """Tally for one run. Identical results count only towards total."""
    bitwidth: int
    composite_more_precise: int = 0
    decomposed_more_precise: int = 0
    incomparable: int = 0
    total: int = 0

    def record(self, outcome: Outcome) -> None:
        self.total += 1
        if outcome is Outcome.COMPOSITE:
            self.composite_more_precise += 1
        elif outcome is Outcome.DECOMPOSED:
            self.decomposed_more_precise += 1
        elif outcome is Outcome.INCOMPARABLE:
            self.incomparable += 1

    @property
    def identical(self) -> int:
        return self.total - (
            self.composite_more_precise + self.decomposed_more_precise + self.incomparable
        )

    def summary(self) -> str:
        return "\n".join([
            f"Total abstract values: {self.total}",
            f"Tests where composite fn was more precise: {self.composite_more_precise}",
            f"Tests where decomposed fn was more precise: {self.decomposed_more_precise}",
            f"Incomparable results: {self.incomparable}",
        ])

    def print(self) -> None:
        print(self.summary())


def compare_range(
    value: ConstantRange,
    composite: TransferFunction,
    decomposed: TransferFunction,
) -> Outcome:
    """Classify the two transfer functions on a single input."""
    composite_result = composite(value)
    decomposed_result = decomposed(value)
    outcome = classify(composite_result, decomposed_result)
    logger.debug(
        f"{value}: {composite.name} -> {composite_result}, "
        f"{decomposed.name} -> {decomposed_result} ({outcome.value})"
    )
    return outcome


def run_comparison(
    bitwidth: BitWidth | int,
    composite: TransferFunction,
    decomposed: TransferFunction,
) -> ComparisonResult:
    width = as_bitwidth(bitwidth)
    ranges = enumerate_abstract_values(width)
    logger.info(
        f"Comparing {composite.name} with {decomposed.name} "
        f"over {len(ranges)} abstract values of {width}"
    )

    result = ComparisonResult(bitwidth=width.bits)
    for value in ranges:
        result.record(compare_range(value, composite, decomposed))

    logger.info(f"Done: {result.identical} of {result.total} results were identical")
    return result
