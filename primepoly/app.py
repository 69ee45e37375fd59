"""Pairing and summing lists of vectors, and a small demonstration command."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from primepoly.linalg import Vector, add_vec
from primepoly.scalar import Scalar


def get_summed(
    pairs: Iterable[tuple[Sequence[Scalar], Sequence[Scalar]]],
) -> list[Vector]:
    """Sum each pair of equally long vectors element-wise."""
    return [add_vec(lhs, rhs) for lhs, rhs in pairs]


def get_zipped(
    lhs: Iterable[Sequence[Scalar]], rhs: Iterable[Sequence[Scalar]]
) -> list[tuple[Vector, Vector]]:
    """Pair vectors from both lists in order, stopping at the shorter list."""
    return [(tuple(a), tuple(b)) for a, b in zip(lhs, rhs)]


def main(argv: Sequence[str] | None = None) -> int:
    """Add the vector ``[1, 2, 3]`` to itself; arguments are ignored."""
    left = tuple(Scalar(n) for n in (1, 2, 3))
    right = tuple(Scalar(n) for n in (1, 2, 3))
    add_vec(left, right)
    return 0