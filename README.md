# primepoly

Exact arithmetic over the prime field of order 17. The package has these modules:

- `primepoly.scalar`: `Scalar`, a frozen field element with value `v` in `0..16`.
  It supports `+`, `-` and `*`, and has `Scalar.from_int(n)`, `pow(n)` and `invert()`.
  `invert()` maps zero to zero. `Scalar.ZERO` and `Scalar.ONE` are the two
  constants, and `PRIME` is the modulus.
- `primepoly.linalg`: vectors, which are tuples of scalars. The functions are
  `zero_vector`, `add_vec`, `sub_vec`, `mul_vec_scalar`, `hadamard`,
  `inner_prod_scalars` and `add_vec_vec`. The element-wise operations raise
  `ValueError` when the lengths differ.
- `primepoly.convert`: two helpers that build vectors from plain integers.
  - `scalar_vec(1, 2, 3)` gives a list of scalars.
  - `scalar_vec_sized(size, ...)` gives a tuple padded with zeros to `size`. It raises
    `ValueError` when more values are given than fit.
- `primepoly.polynomial`: polynomial types and evaluation functions.
  - `ScalarPolynomial` supports `+`, `-` and `*`, `trim()`, `eval(x)` and `len()`.
  - `VectorPolynomial` has vector coefficients of a fixed `size`. It supports `+`,
    `*`, `trim()`, `eval(x)` and `len()`.
  - `evaluate_polynomial` and `evaluate_vector_polynomial` evaluate by Horner's rule.

  Adding two vector polynomials sums only the coefficients that both operands have.
  Multiplying two vector polynomials gives a `ScalarPolynomial`. Its value at `x` is
  the inner product of the two vectors obtained by evaluating the operands at `x`.
- `primepoly.modten`: `ModTen`, a digit with addition modulo 10, and `add_digits`
  for element-wise sums of equally long digit sequences.
- `primepoly.app`: two helpers for lists of vectors.
  - `get_zipped(lhs, rhs)` pairs vectors, stopping at the shorter list.
  - `get_summed(pairs)` adds each pair element-wise.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from primepoly.scalar import Scalar
from primepoly.convert import scalar_vec
from primepoly.polynomial import ScalarPolynomial, evaluate_polynomial

# 1 + 2x + 3x^2 at x = 2 is 17, which is 0 in the field
print(evaluate_polynomial(scalar_vec(1, 2, 3), Scalar.from_int(2)))   # 0

left = ScalarPolynomial.from_scalars(scalar_vec(1, 2))
right = ScalarPolynomial.from_scalars(scalar_vec(3, 4))
print(left * right)                                          # [3, 10, 8]

print(Scalar.from_int(3).invert() * Scalar.from_int(3))      # 1
```

## Command line

```
primepoly
```

The command adds the sample vector `[1, 2, 3]` to itself and exits with status 0. It ignores its arguments and prints nothing.

## What it does not do

The package has no command-line interface for doing calculations. Use it as a library from Python. The field modulus is fixed at 17.