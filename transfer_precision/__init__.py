"""
Exhaustive precision comparison of interval transfer functions.

Enumerates every ConstantRange of a small bit width and checks whether the
domain's own transfer function or its decomposed, member-by-member lift
gives the tighter result.
"""
from transfer_precision.abstraction import abstractize, concretize
from transfer_precision.bitwidth import BitWidth
from transfer_precision.constant_range import ConstantRange, MalformedRangeError
from transfer_precision.driver import ComparisonResult, run_comparison
from transfer_precision.enumeration import enumerate_abstract_values
from transfer_precision.precision import Outcome, classify, is_more_precise
from transfer_precision.transfer import (
    CompositeTransfer,
    DecomposedTransfer,
    TransferFunction,
    make_transfer_pair,
)

__all__ = [
    "BitWidth",
    "ComparisonResult",
    "CompositeTransfer",
    "ConstantRange",
    "DecomposedTransfer",
    "MalformedRangeError",
    "Outcome",
    "TransferFunction",
    "abstractize",
    "classify",
    "concretize",
    "enumerate_abstract_values",
    "is_more_precise",
    "make_transfer_pair",
    "run_comparison",
]
