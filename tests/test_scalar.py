import pytest
from hypothesis import given
from hypothesis import strategies as st

from primepoly.scalar import PRIME, Scalar

u128 = st.integers(min_value=0, max_value=2**128 - 1)
u64 = st.integers(min_value=0, max_value=2**64 - 1)
u16 = st.integers(min_value=0, max_value=2**16 - 1)


@given(u128)
def test_field_multiplicative_inverse(n):
    s = Scalar.from_int(n)
    s = Scalar.from_int(1) if s == Scalar.ZERO else s
    assert s * s.invert() == Scalar.from_int(1)


@given(u128, u128)
def test_field_multiplication_correct(a, b):
    exp = (a % PRIME) * (b % PRIME) % PRIME
    assert Scalar.from_int(a) * Scalar.from_int(b) == Scalar(exp)


@given(u128)
def test_field_double_invert(n):
    assert Scalar.from_int(n).invert().invert() == Scalar.from_int(n)


@given(u128)
def test_field_additive_inverse(n):
    s = Scalar.from_int(n)
    assert s + (Scalar.ZERO - s) == Scalar.ZERO


@given(u128, u16)
def test_field_power_inverse(n, x):
    s = Scalar.from_int(n)
    assert s.pow(x).invert() == s.invert().pow(x)


@given(u64, u64, u64)
def test_field_distributive_law(x, y, z):
    sx, sy, sz = Scalar.from_int(x), Scalar.from_int(y), Scalar.from_int(z)
    assert (sx + sy) * sz == sx * sz + sy * sz


def test_field_one_multiplicative_inverse():
    one = Scalar.from_int(1)
    assert one * one.invert() == Scalar.from_int(1)


def test_field_basic_arithmetic():
    one = Scalar.from_int(1)
    assert one + one == Scalar.from_int(2)


def test_from_int_reduces_modulo_prime():
    assert Scalar.from_int(PRIME) == Scalar.ZERO
    assert Scalar.from_int(PRIME + 3) == Scalar(3)


def test_constructor_rejects_unreduced_value():
    with pytest.raises(ValueError):
        Scalar(PRIME)
    with pytest.raises(ValueError):
        Scalar(-1)


def test_pow_zero_is_one():
    assert Scalar(5).pow(0) == Scalar.ONE


def test_pow_rejects_negative_exponent():
    with pytest.raises(ValueError):
        Scalar(3).pow(-1)


def test_str_shows_value():
    assert str(Scalar(11)) == "11"


def test_zero_inverts_to_zero():
    assert Scalar.ZERO.invert() == Scalar.ZERO