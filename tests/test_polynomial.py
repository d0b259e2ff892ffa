# tests/test_polynomial.py
import math
from datetime import datetime

import pytest

from mwrlib.returns.polynomial import Polynomial, build_coefficients, build_polynomial
from mwrlib.schedule import CashEntry


def test_build_coefficients_one_year():
    entries = [CashEntry("2023-01-01", -1000.0), CashEntry("2024-01-01", 1100.0)]
    coefficients = build_coefficients(entries, datetime(2023, 1, 1))
    assert coefficients == {0.0: -1000.0, 1.0: 1100.0}


def test_build_coefficients_sums_same_date():
    entries = [
        CashEntry("2023-01-01", -1000.0),
        CashEntry("2023-07-01", -200.0),
        CashEntry("2023-07-01", -300.0),
        CashEntry("2024-01-01", 1600.0),
    ]
    coefficients = build_coefficients(entries, datetime(2023, 1, 1))
    assert coefficients[181 / 365.0] == -500.0
    assert len(coefficients) == 3


def test_build_coefficients_drops_cancelled_buckets():
    entries = [
        CashEntry("2023-01-01", -1000.0),
        CashEntry("2023-07-01", 500.0),
        CashEntry("2023-07-01", -500.0),
        CashEntry("2024-01-01", 1100.0),
    ]
    coefficients = build_coefficients(entries, datetime(2023, 1, 1))
    assert 181 / 365.0 not in coefficients
    assert len(coefficients) == 2


def test_build_coefficients_fractional_and_negative_exponents():
    entries = [
        CashEntry(datetime(2022, 12, 31), -10.0),
        CashEntry(datetime(2023, 1, 1, 12, 0), 20.0),
    ]
    coefficients = build_coefficients(entries, datetime(2023, 1, 1))
    assert sorted(coefficients) == pytest.approx([-1 / 365.0, 0.5 / 365.0])


def test_build_polynomial_empty_when_everything_cancels():
    entries = [CashEntry("2023-01-01", 0.0), CashEntry("2024-01-01", 0.0)]
    poly = build_polynomial(entries, datetime(2023, 1, 1))
    assert len(poly) == 0
    assert poly.evaluate(0.7) == 0.0


def test_evaluate_records_first_witnesses_only():
    poly = Polynomial({0.0: -1000.0, 1.0: 1100.0})
    assert poly.positive_point is None and poly.negative_point is None

    assert poly.evaluate(1.0) == pytest.approx(100.0)
    assert poly.positive_point == 1.0
    assert poly.negative_point is None

    assert poly.evaluate(0.5) == pytest.approx(-450.0)
    assert poly.negative_point == 0.5

    poly.evaluate(2.0)
    poly.evaluate(0.0)
    assert (poly.negative_point, poly.positive_point) == (0.5, 1.0)
    assert poly.has_bracket


@pytest.mark.parametrize(
    "coefficients, x",
    [
        ({0.5: 1.0, 0.0: -1.0}, -1.0),  # negative base, fractional exponent
        ({-1.0: 1.0, 0.0: -1.0}, 0.0),  # zero base, negative exponent
        ({400.0: 1.0, 0.0: -1.0}, 10.0),  # overflow
    ],
)
def test_evaluate_non_finite_records_no_witness(coefficients, x):
    poly = Polynomial(coefficients)
    assert not math.isfinite(poly.evaluate(x))
    assert poly.positive_point is None
    assert poly.negative_point is None


def test_is_root_uses_absolute_tolerance():
    poly = Polynomial({0.0: -1000.0, 1.0: 1100.0})
    assert poly.is_root(1000.5 / 1100.0)  # f = 0.5
    assert not poly.is_root(1002.0 / 1100.0)  # f = 2
    assert poly.is_root(1002.0 / 1100.0, tolerance=5.0)
    assert Polynomial({0.0: -1.0, 1.0: 1.0}, root_tolerance=1e-9).is_root(1.0)


def test_each_polynomial_has_its_own_witnesses():
    first = Polynomial({0.0: -1.0, 1.0: 2.0})
    first.evaluate(1.0)
    first.evaluate(0.0)
    second = Polynomial({0.0: -1.0, 1.0: 2.0})
    assert second.positive_point is None and second.negative_point is None
    assert second.evaluations == 0
