# transfer_precision/transfer.py
"""
Transfer functions over ConstantRange.

Two ways of lifting the same concrete operation to ranges:

- CompositeTransfer applies the domain's own range operation.
- DecomposedTransfer concretizes, applies the concrete operation to each
  member and abstractizes the results.

Both satisfy the TransferFunction protocol, so the driver never needs to
know which one it is holding.
"""
from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable, Dict, Protocol, Tuple

from transfer_precision.abstraction import abstractize, concretize
from transfer_precision.constant_range import ConstantRange, MalformedRangeError


class TransferFunction(Protocol):
    name: str

    def __call__(self, value: ConstantRange) -> ConstantRange:
        ...


@dataclass(frozen=True)
class CompositeTransfer:
    """Applies a range operation directly to the bounds."""
    name: str
    operation: Callable[[ConstantRange], ConstantRange]

    def __call__(self, value: ConstantRange) -> ConstantRange:
        result = self.operation(value)
        if result.width != value.width:
            raise MalformedRangeError(
                f"{self.name} turned a {value.width} range into a {result.width} one"
            )
        return result


@dataclass(frozen=True)
class DecomposedTransfer:
    """
    Applies a concrete operation member by member.

    The operation sees mathematical ints. A result that does not fit the
    width (abs(signed_min), -signed_min) is dropped, not wrapped.
    """
    name: str
    operation: Callable[[int], int]

    def __call__(self, value: ConstantRange) -> ConstantRange:
        width = value.width
        if value.is_empty_set():
            return ConstantRange.empty(width)

        results = set()
        for member in concretize(value):
            image = self.operation(member)
            if width.is_representable(image):
                results.add(image)
        return abstractize(results, width)


# --- Operation registry ------------------------------------------------------


@dataclass(frozen=True)
class Operation:
    """A concrete operation and its native range counterpart."""
    name: str
    concrete: Callable[[int], int]
    composite: Callable[[ConstantRange, bool], ConstantRange]
    has_poison_variant: bool = False


OPERATIONS: Dict[str, Operation] = {
    "abs": Operation(
        name="abs",
        concrete=abs,
        composite=lambda r, poison: r.abs(int_min_is_poison=poison),
        has_poison_variant=True,
    ),
    "neg": Operation(
        name="neg",
        concrete=operator.neg,
        composite=lambda r, poison: r.negate(),
    ),
}


def make_transfer_pair(
    name: str, int_min_is_poison: bool = False
) -> Tuple[CompositeTransfer, DecomposedTransfer]:
    """Build the (composite, decomposed) transfer functions for a registered operation."""
    try:
        op = OPERATIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown operation {name!r}, expected one of {sorted(OPERATIONS)}"
        ) from None
    if int_min_is_poison and not op.has_poison_variant:
        raise ValueError(f"Operation {name!r} has no int-min-is-poison variant")

    composite = CompositeTransfer(
        name=f"{name} (composite)",
        operation=lambda r: op.composite(r, int_min_is_poison),
    )
    decomposed = DecomposedTransfer(name=f"{name} (decomposed)", operation=op.concrete)
    return composite, decomposed
