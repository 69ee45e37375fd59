import pytest
from hypothesis import given
from hypothesis import strategies as st

from primepoly.app import get_summed, get_zipped, main
from primepoly.convert import scalar_vec_sized
from primepoly.linalg import add_vec, add_vec_vec, sub_vec
from primepoly.scalar import PRIME, Scalar

_scalars = st.integers(min_value=0, max_value=PRIME - 1).map(Scalar)


def _vectors(size):
    return st.lists(_scalars, min_size=size, max_size=size).map(tuple)


def test_main_returns_success():
    assert main() == 0


def test_main_ignores_arguments():
    assert main(["--anything", "extra"]) == 0


def test_get_summed_simple_example():
    pair = (scalar_vec_sized(3, 1, 2, 3), scalar_vec_sized(3, 1, 2, 3))
    assert get_summed([pair]) == [scalar_vec_sized(3, 2, 4, 6)]


def test_get_summed_empty():
    assert get_summed([]) == []


def test_get_summed_length_mismatch_raises():
    pair = (scalar_vec_sized(3, 1, 2, 3), scalar_vec_sized(2, 1, 2))
    with pytest.raises(ValueError):
        get_summed([pair])


def test_get_zipped_pairs_in_order():
    a = scalar_vec_sized(2, 1, 2)
    b = scalar_vec_sized(2, 3, 4)
    c = scalar_vec_sized(2, 5, 6)
    d = scalar_vec_sized(2, 7, 8)
    assert get_zipped([a, b], [c, d]) == [(a, c), (b, d)]


def test_get_zipped_stops_at_shorter():
    a = scalar_vec_sized(2, 1, 2)
    b = scalar_vec_sized(2, 3, 4)
    c = scalar_vec_sized(2, 5, 6)
    assert get_zipped([a, b], [c]) == [(a, c)]
    assert get_zipped([], [a, b]) == []


@given(
    st.lists(_vectors(4), max_size=6),
    st.lists(_vectors(4), max_size=6),
)
def test_zipped_length_is_minimum(lhs, rhs):
    assert len(get_zipped(lhs, rhs)) == min(len(lhs), len(rhs))


@given(st.integers(min_value=0, max_value=6).flatmap(
    lambda n: st.tuples(
        st.lists(_vectors(3), min_size=n, max_size=n),
        st.lists(_vectors(3), min_size=n, max_size=n),
    )
))
def test_summed_of_zipped_matches_add_vec_vec(lists):
    lhs, rhs = lists
    assert get_summed(get_zipped(lhs, rhs)) == add_vec_vec(lhs, rhs)


@given(_vectors(5), _vectors(5))
def test_summed_then_subtract_recovers_left(a, b):
    (total,) = get_summed([(a, b)])
    assert sub_vec(total, b) == a


@given(_vectors(5), _vectors(5))
def test_summed_is_commutative(a, b):
    assert get_summed([(a, b)]) == get_summed([(b, a)])
    assert get_summed([(a, b)]) == [add_vec(a, b)]