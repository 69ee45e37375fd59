"""Digits with addition modulo ten."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

_BYTE_MAX = 255


@dataclass(frozen=True)
class ModTen:
    """A value ``0 <= v < ModTen.MAX`` with addition modulo ``MAX``."""

    v: int

    MAX: ClassVar[int] = 10

    def __post_init__(self) -> None:
        if not 0 <= self.v < self.MAX:
            raise ValueError(f"value {self.v} is outside 0..{self.MAX - 1}")

    @classmethod
    def from_int(cls, n: int) -> ModTen:
        """Reduce a byte-sized integer modulo ``MAX``."""
        if not 0 <= n <= _BYTE_MAX:
            raise ValueError(f"{n} is not a byte value")
        return cls(n % cls.MAX)

    def __add__(self, other: object) -> ModTen:
        if not isinstance(other, ModTen):
            return NotImplemented
        return ModTen((self.v + other.v) % self.MAX)


def add_digits(lhs: Sequence[ModTen], rhs: Sequence[ModTen]) -> list[ModTen]:
    """Element-wise sum of two equally long sequences."""
    if len(lhs) != len(rhs):
        raise ValueError(f"length mismatch: {len(lhs)} != {len(rhs)}")
    return [a + b for a, b in zip(lhs, rhs)]