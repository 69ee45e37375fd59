"""Helpers for building scalar vectors from plain integers."""

from __future__ import annotations

from primepoly.linalg import Vector, zero_vector
from primepoly.scalar import Scalar


def scalar_vec(*args: int) -> list[Scalar]:
    """A list of scalars, each integer reduced into the field."""
    return [Scalar.from_int(n) for n in args]


def scalar_vec_sized(size: int, *args: int) -> Vector:
    """A vector of ``size`` scalars, filled from the front and padded with zeros."""
    if len(args) > size:
        raise ValueError(f"{len(args)} values do not fit in a vector of size {size}")
    values = scalar_vec(*args)
    return tuple(values) + zero_vector(size - len(values))