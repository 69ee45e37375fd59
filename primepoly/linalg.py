"""Fixed-length vectors of field scalars and the operations on them."""

from __future__ import annotations

from collections.abc import Sequence

from primepoly.scalar import Scalar

Vector = tuple[Scalar, ...]


def _check_same_length(lhs: Sequence[object], rhs: Sequence[object]) -> None:
    if len(lhs) != len(rhs):
        raise ValueError(f"length mismatch: {len(lhs)} != {len(rhs)}")


def zero_vector(size: int) -> Vector:
    """The all-zero vector of the given size."""
    if size < 0:
        raise ValueError("vector size must be non-negative")
    return (Scalar.ZERO,) * size


def add_vec(lhs: Sequence[Scalar], rhs: Sequence[Scalar]) -> Vector:
    """Element-wise sum of two vectors of equal length."""
    _check_same_length(lhs, rhs)
    return tuple(a + b for a, b in zip(lhs, rhs))


def sub_vec(lhs: Sequence[Scalar], rhs: Sequence[Scalar]) -> Vector:
    """Element-wise difference of two vectors of equal length."""
    _check_same_length(lhs, rhs)
    return tuple(a - b for a, b in zip(lhs, rhs))


def mul_vec_scalar(vec: Sequence[Scalar], scalar: Scalar) -> Vector:
    """Multiply every element of ``vec`` by ``scalar``."""
    return tuple(e * scalar for e in vec)


def hadamard(lhs: Sequence[Scalar], rhs: Sequence[Scalar]) -> Vector:
    """Element-wise product of two vectors of equal length."""
    _check_same_length(lhs, rhs)
    return tuple(a * b for a, b in zip(lhs, rhs))


def inner_prod_scalars(a: Sequence[Scalar], b: Sequence[Scalar]) -> Scalar:
    """Inner product, e.g. [1, 2, 3] x [4, 5, 6] = 32 (reduced in the field)."""
    acc = Scalar.ZERO
    for x, y in zip(a, b):
        acc = acc + x * y
    return acc


def add_vec_vec(
    lhs: Sequence[Sequence[Scalar]], rhs: Sequence[Sequence[Scalar]]
) -> list[Vector]:
    """Pairwise sum of two equally long lists of vectors."""
    _check_same_length(lhs, rhs)
    return [add_vec(a, b) for a, b in zip(lhs, rhs)]