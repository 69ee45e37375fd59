"""Elements of the prime field of order ``PRIME``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

PRIME = 17


@dataclass(frozen=True)
class Scalar:
    """An element of the field of integers modulo ``PRIME``.

    The value ``v`` must already be reduced, so that ``0 <= v < PRIME``.
    """

    v: int

    ZERO: ClassVar[Scalar]
    ONE: ClassVar[Scalar]

    def __post_init__(self) -> None:
        if not 0 <= self.v < PRIME:
            raise ValueError(f"scalar value {self.v} is outside 0..{PRIME - 1}")

    @classmethod
    def from_int(cls, n: int) -> Scalar:
        """Reduce ``n`` modulo ``PRIME``."""
        return cls(n % PRIME)

    def pow(self, n: int) -> Scalar:
        """Raise to the non-negative power ``n``."""
        if n < 0:
            raise ValueError("exponent must be non-negative")
        return Scalar(pow(self.v, n, PRIME))

    def invert(self) -> Scalar:
        """Multiplicative inverse by Fermat's little theorem; zero maps to zero."""
        return self.pow(PRIME - 2)

    def __add__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self.v + other.v) % PRIME)

    def __sub__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self.v + PRIME - other.v) % PRIME)

    def __mul__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar((self.v * other.v) % PRIME)

    def __str__(self) -> str:
        return str(self.v)


Scalar.ZERO = Scalar(0)
Scalar.ONE = Scalar(1)