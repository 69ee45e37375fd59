"""Polynomials over the prime field, with scalar or vector coefficients."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from primepoly.linalg import (
    Vector,
    add_vec,
    add_vec_vec,
    inner_prod_scalars,
    mul_vec_scalar,
    zero_vector,
)
from primepoly.scalar import Scalar

_C = TypeVar("_C")


def evaluate_polynomial(coeffs: Iterable[Scalar], u: Scalar) -> Scalar:
    """Evaluate ``a[0] + a[1]u + a[2]u^2 + ...`` by Horner's rule."""
    result = Scalar.ZERO
    for coef in reversed(list(coeffs)):
        result = u * result + coef
    return result


def evaluate_vector_polynomial(
    coeffs: Iterable[Sequence[Scalar]], u: Scalar, size: int
) -> Vector:
    """Evaluate a polynomial with vector coefficients of length ``size`` at ``u``."""
    result = zero_vector(size)
    for coef in reversed(list(coeffs)):
        result = add_vec(mul_vec_scalar(result, u), coef)
    return result


def _convolve(
    lhs: Sequence[_C],
    rhs: Sequence[_C],
    product: Callable[[_C, _C], Scalar],
) -> tuple[Scalar, ...]:
    """Coefficients of the product of two polynomials under ``product``.

    When one side has no coefficients, the result is as many zeros as the
    other side has coefficients.
    """
    if not lhs or not rhs:
        return (Scalar.ZERO,) * max(len(lhs), len(rhs))
    out = [Scalar.ZERO] * (len(lhs) + len(rhs) - 1)
    for i, a in enumerate(lhs):
        for j, b in enumerate(rhs):
            out[i + j] = out[i + j] + product(a, b)
    return tuple(out)


def _strip_trailing(items: Sequence[_C], is_zero: Callable[[_C], bool]) -> list[_C]:
    end = len(items)
    while end > 0 and is_zero(items[end - 1]):
        end -= 1
    return list(items[:end])


@dataclass(frozen=True)
class ScalarPolynomial:
    """A polynomial whose coefficients are scalars, lowest degree first."""

    coeffs: tuple[Scalar, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "coeffs", tuple(self.coeffs))

    @classmethod
    def from_scalars(cls, values: Iterable[Scalar]) -> ScalarPolynomial:
        """Build a polynomial; no values gives the zero polynomial ``[0]``."""
        coeffs = tuple(values)
        return cls(coeffs or (Scalar.ZERO,))

    def __len__(self) -> int:
        return len(self.coeffs)

    def trim(self) -> ScalarPolynomial:
        """Drop trailing zero coefficients, keeping at least ``[0]``."""
        kept = _strip_trailing(self.coeffs, lambda c: c == Scalar.ZERO)
        return ScalarPolynomial(tuple(kept) or (Scalar.ZERO,))

    def eval(self, x: Scalar) -> Scalar:
        """Value of the polynomial at ``x``."""
        return evaluate_polynomial(self.coeffs, x)

    def __add__(self, other: object) -> ScalarPolynomial:
        if not isinstance(other, ScalarPolynomial):
            return NotImplemented
        shorter = min(len(self), len(other))
        summed = [a + b for a, b in zip(self.coeffs, other.coeffs)]
        longer = self.coeffs if len(self) > len(other) else other.coeffs
        return ScalarPolynomial(tuple(summed) + longer[shorter:])

    def __sub__(self, other: object) -> ScalarPolynomial:
        """Coefficient-wise difference.

        Coefficients past the end of the shorter operand are taken from the
        longer one and negated, whichever side is longer.
        """
        if not isinstance(other, ScalarPolynomial):
            return NotImplemented
        shorter = min(len(self), len(other))
        diff = [a - b for a, b in zip(self.coeffs, other.coeffs)]
        longer = self.coeffs if len(self) > len(other) else other.coeffs
        tail = tuple(Scalar.ZERO - c for c in longer[shorter:])
        return ScalarPolynomial(tuple(diff) + tail)

    def __mul__(self, other: object) -> ScalarPolynomial:
        if not isinstance(other, ScalarPolynomial):
            return NotImplemented
        return ScalarPolynomial(
            _convolve(self.coeffs, other.coeffs, lambda a, b: a * b)
        )

    def __str__(self) -> str:
        return str([c.v for c in self.coeffs])


@dataclass(frozen=True)
class VectorPolynomial:
    """A polynomial whose coefficients are vectors of ``size`` scalars."""

    coeffs: tuple[Vector, ...]
    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("vector size must be non-negative")
        coeffs = tuple(tuple(c) for c in self.coeffs)
        for c in coeffs:
            if len(c) != self.size:
                raise ValueError(
                    f"coefficient of length {len(c)} in a polynomial of size {self.size}"
                )
        object.__setattr__(self, "coeffs", coeffs)

    @classmethod
    def from_vectors(
        cls, vectors: Iterable[Sequence[Scalar]], size: int
    ) -> VectorPolynomial:
        """Build a polynomial; no vectors gives the zero polynomial."""
        coeffs = tuple(tuple(v) for v in vectors)
        return cls(coeffs or (zero_vector(size),), size)

    def __len__(self) -> int:
        return len(self.coeffs)

    def trim(self) -> VectorPolynomial:
        """Drop trailing all-zero coefficients, keeping at least one zero vector."""
        kept = _strip_trailing(
            self.coeffs, lambda c: all(e == Scalar.ZERO for e in c)
        )
        return VectorPolynomial(tuple(kept) or (zero_vector(self.size),), self.size)

    def eval(self, x: Scalar) -> Vector:
        """Value of the polynomial at ``x``, a vector of ``size`` scalars."""
        return evaluate_vector_polynomial(self.coeffs, x, self.size)

    def _check_size(self, other: VectorPolynomial) -> None:
        if self.size != other.size:
            raise ValueError(f"size mismatch: {self.size} != {other.size}")

    def __add__(self, other: object) -> VectorPolynomial:
        """Coefficient-wise sum over the coefficients both operands have."""
        if not isinstance(other, VectorPolynomial):
            return NotImplemented
        self._check_size(other)
        shorter = min(len(self), len(other))
        summed = add_vec_vec(self.coeffs[:shorter], other.coeffs[:shorter])
        return VectorPolynomial(tuple(summed), self.size)

    def __mul__(self, other: object) -> ScalarPolynomial:
        """Product with inner products of coefficients, giving a scalar polynomial."""
        if not isinstance(other, VectorPolynomial):
            return NotImplemented
        self._check_size(other)
        return ScalarPolynomial(
            _convolve(self.coeffs, other.coeffs, inner_prod_scalars)
        )

    def __str__(self) -> str:
        return str([[e.v for e in c] for c in self.coeffs])