# tests/test_reducer.py
from __future__ import annotations

from fractions import Fraction

import pytest

from ratio.factors import factors_of
from ratio.reducer import Ratio, reduce_pair


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (360, 480, "3:4"),
        (9, 6, "3:2"),
        (1, 1, "1:1"),
        (7, 7, "1:1"),
        (100, 1, "100:1"),
        (1, 100, "1:100"),
        (13, 17, "13:17"),
        (4294967295, 5, "858993459:1"),
    ],
)
def test_ratio_from_pair(a, b, expected):
    assert str(Ratio.from_pair(a, b)) == expected


@pytest.mark.parametrize(("a", "b"), [(3, 4), (1, 1), (13, 17), (25, 36)])
def test_reduction_is_idempotent_on_coprime_pairs(a, b):
    assert Ratio.from_pair(a, b) == Ratio(a, b)


def test_reducing_twice_changes_nothing():
    once = Ratio.from_pair(360, 960)
    assert Ratio.from_pair(once.numerator, once.denominator) == once


def test_large_inputs_divide_exactly():
    # 2**31 and 2**31 - 2 share 2; float round trips are not involved
    r = Ratio.from_pair(2**31, 2**31 - 2)
    assert (r.numerator, r.denominator) == (2**30, 2**30 - 1)


def test_reduction_records_working():
    red = reduce_pair(9, 6)
    assert red.numerator_factors == factors_of(9)
    assert red.denominator_factors == factors_of(6)
    assert list(red.common) == [1, 3]
    assert red.hcf == 3
    assert red.ratio == Ratio(3, 2)


def test_ratio_is_immutable():
    r = Ratio(3, 4)
    with pytest.raises(AttributeError):
        r.numerator = 5  # type: ignore[misc]


def test_as_fraction():
    assert Ratio.from_pair(360, 480).as_fraction() == Fraction(3, 4)


def test_zero_numerator_has_hcf_one():
    assert reduce_pair(0, 5).ratio == Ratio(0, 5)


def test_zero_hcf_raises():
    with pytest.raises(ZeroDivisionError):
        Ratio.from_pair(0, 0)
