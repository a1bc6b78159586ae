# transfer_precision/bitwidth.py
"""
Fixed-width signed integers.

Concrete values are plain Python ints read as two's-complement numbers of
a given width. BitWidth knows the signed extremes for that width and how
to move between a signed value and its unsigned bit pattern.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BitWidth:
    """
    Width of a two's-complement integer type.

    Signed range:  [-2^(bits-1), 2^(bits-1) - 1]
    Bit patterns:  [0, 2^bits - 1]
    """

    bits: int

    def __post_init__(self):
        if self.bits < 1:
            raise ValueError(f"Bit width must be at least 1, got {self.bits}")

    # Extremes ----------------------------------------------------------------

    @property
    def modulus(self) -> int:
        return 1 << self.bits

    @property
    def signed_min(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def signed_max(self) -> int:
        return (1 << (self.bits - 1)) - 1

    @property
    def unsigned_max(self) -> int:
        return self.modulus - 1

    # Conversions -------------------------------------------------------------

    def is_representable(self, value: int) -> bool:
        """True if the mathematical value fits without wrapping."""
        return self.signed_min <= value <= self.signed_max

    def wrap(self, value: int) -> int:
        """Reduce an arbitrary int modulo 2^bits into the signed range."""
        return self.to_signed(value & self.unsigned_max)

    def to_unsigned(self, value: int) -> int:
        """Bit pattern of a signed value."""
        return value & self.unsigned_max

    def to_signed(self, pattern: int) -> int:
        """Signed value of a bit pattern."""
        if pattern > self.signed_max:
            return pattern - self.modulus
        return pattern

    def successor(self, value: int) -> int:
        """value + 1 with wraparound at the signed maximum."""
        return self.wrap(value + 1)

    def check(self, value: int) -> int:
        """Return value unchanged, or raise if it is not representable."""
        if not self.is_representable(value):
            raise ValueError(
                f"{value} is outside the signed range "
                f"[{self.signed_min}, {self.signed_max}] of i{self.bits}"
            )
        return value

    def __str__(self) -> str:  # cosmetic
        return f"i{self.bits}"


def as_bitwidth(width: BitWidth | int) -> BitWidth:
    """Accept either a BitWidth or a plain number of bits."""
    if isinstance(width, BitWidth):
        return width
    return BitWidth(width)
