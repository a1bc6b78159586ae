# transfer_precision/constant_range.py
"""
Wrapped interval domain over fixed-width integers.

A ConstantRange is the half-open interval [lower, upper) of bit patterns,
read modulo 2^w, so a range may wrap past the unsigned or the signed
maximum. Bounds are stored as signed values of the range's width.

Two bound patterns are reserved when lower == upper:

  all zeros  (0)    – the empty set
  all ones   (-1)   – the full set

Any other lower == upper is malformed and rejected at construction.
"""
from __future__ import annotations

from dataclasses import dataclass

from transfer_precision.bitwidth import BitWidth, as_bitwidth


class MalformedRangeError(ValueError):
    """Bounds that do not describe a range of the given width."""


@dataclass(frozen=True)
class ConstantRange:
    width: BitWidth
    lower: int
    upper: int

    def __post_init__(self):
        for bound in (self.lower, self.upper):
            if not self.width.is_representable(bound):
                raise MalformedRangeError(
                    f"Bound {bound} does not fit in {self.width}"
                )
        if self.lower == self.upper and self.lower not in (0, -1):
            raise MalformedRangeError(
                f"[{self.lower}, {self.upper}) is neither the empty nor the full set"
            )

    # Constructors / special elements -----------------------------------------

    @classmethod
    def empty(cls, width: BitWidth | int) -> "ConstantRange":
        """The range holding no values."""
        return cls(as_bitwidth(width), 0, 0)

    @classmethod
    def full(cls, width: BitWidth | int) -> "ConstantRange":
        """The range holding every value of the width."""
        return cls(as_bitwidth(width), -1, -1)

    @classmethod
    def single(cls, width: BitWidth | int, value: int) -> "ConstantRange":
        """The range holding exactly one value."""
        w = as_bitwidth(width)
        return cls(w, w.check(value), w.successor(value))

    @classmethod
    def non_empty(cls, width: BitWidth | int, lower: int, upper: int) -> "ConstantRange":
        """
        [lower, upper) where equal bounds mean the full set.

        Bounds are wrapped into the width first.
        """
        w = as_bitwidth(width)
        lower, upper = w.wrap(lower), w.wrap(upper)
        if lower == upper:
            return cls.full(w)
        return cls(w, lower, upper)

    # Shape -------------------------------------------------------------------

    def _ulower(self) -> int:
        return self.width.to_unsigned(self.lower)

    def _uupper(self) -> int:
        return self.width.to_unsigned(self.upper)

    def is_empty_set(self) -> bool:
        return self.lower == self.upper == 0

    def is_full_set(self) -> bool:
        return self.lower == self.upper == -1

    def is_upper_wrapped(self) -> bool:
        """Lower bound pattern above the upper one, unsigned."""
        return self._ulower() > self._uupper()

    def is_wrapped_set(self) -> bool:
        """Holds both the unsigned maximum and zero."""
        return self.is_upper_wrapped() and self._uupper() != 0

    def is_upper_sign_wrapped(self) -> bool:
        """Lower bound above the upper one, signed."""
        return self.lower > self.upper

    def is_sign_wrapped_set(self) -> bool:
        """Holds both the signed maximum and the signed minimum."""
        return self.is_upper_sign_wrapped() and self.upper != self.width.signed_min

    def size(self) -> int:
        """Number of values in the range."""
        if self.is_full_set():
            return self.width.modulus
        return (self._uupper() - self._ulower()) % self.width.modulus

    def signed_min(self) -> int:
        """Smallest member under signed order."""
        if self.is_full_set() or self.is_sign_wrapped_set():
            return self.width.signed_min
        return self.lower

    def signed_max(self) -> int:
        """Largest member under signed order."""
        if self.is_full_set() or self.is_upper_sign_wrapped():
            return self.width.signed_max
        return self.width.wrap(self.upper - 1)

    # Containment -------------------------------------------------------------

    def __contains__(self, value: int) -> bool:
        """Membership of a single concrete value."""
        u = self.width.to_unsigned(self.width.check(value))
        if self.lower == self.upper:
            return self.is_full_set()
        if not self.is_upper_wrapped():
            return self._ulower() <= u < self._uupper()
        return self._ulower() <= u or u < self._uupper()

    def contains(self, other: "ConstantRange") -> bool:
        """True if every member of other is a member of self."""
        self._check_width(other)
        if self.is_full_set() or other.is_empty_set():
            return True
        if self.is_empty_set() or other.is_full_set():
            return False

        lo, hi = self._ulower(), self._uupper()
        other_lo, other_hi = other._ulower(), other._uupper()
        if not self.is_upper_wrapped():
            if other.is_upper_wrapped():
                return False
            return lo <= other_lo and other_hi <= hi
        if not other.is_upper_wrapped():
            return other_hi <= hi or lo <= other_lo
        return other_hi <= hi and lo <= other_lo

    def _check_width(self, other: "ConstantRange") -> None:
        if self.width != other.width:
            raise MalformedRangeError(
                f"Cannot compare {self.width} range with {other.width} range"
            )

    # Transfer functions ------------------------------------------------------

    def abs(self, int_min_is_poison: bool = False) -> "ConstantRange":
        """
        Absolute value of every member.

        abs(signed_min) wraps back to signed_min, so it stays in the result
        unless int_min_is_poison is set, in which case it is left out.
        """
        w = self.width
        if self.is_empty_set():
            return ConstantRange.empty(w)

        if self.is_sign_wrapped_set():
            # Holds signed_min, and crosses zero unless lower is positive.
            if self.upper > 0 or self.lower <= 0:
                lo = 0
            else:
                lo = w.to_signed(min(self._ulower(), w.to_unsigned(-self.upper + 1)))
            if int_min_is_poison:
                return ConstantRange(w, lo, w.signed_min)
            return ConstantRange(w, lo, w.wrap(w.signed_min + 1))

        smin, smax = self.signed_min(), self.signed_max()
        if int_min_is_poison and smin == w.signed_min:
            if smax == w.signed_min:
                return ConstantRange.empty(w)
            smin += 1

        if smin >= 0:
            return ConstantRange(w, smin, w.wrap(smax + 1))
        if smax < 0:
            return ConstantRange(w, w.wrap(-smax), w.wrap(-smin + 1))
        top = max(w.to_unsigned(-smin), smax)
        return ConstantRange.non_empty(w, 0, top + 1)

    def negate(self) -> "ConstantRange":
        """Two's-complement negation of every member."""
        if self.is_empty_set() or self.is_full_set():
            return self
        w = self.width
        return ConstantRange(w, w.wrap(1 - self.upper), w.wrap(1 - self.lower))

    def __str__(self) -> str:
        if self.is_empty_set():
            return "empty-set"
        if self.is_full_set():
            return "full-set"
        return f"[{self.lower},{self.upper})"
