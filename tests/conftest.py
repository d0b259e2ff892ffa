# tests/conftest.py
from __future__ import annotations

import pytest

from tests.utils import make_schedule


@pytest.fixture
def one_year_ten_percent():
    # -1000 in, 1100 out one year later
    return make_schedule(
        "assets:broker:VTI",
        opening=("2023-01-01", -1000.0),
        closing=("2024-01-01", 1100.0),
    )


@pytest.fixture
def mid_year_deposit():
    return make_schedule(
        "assets:broker:BND",
        opening=("2023-01-01", -1000.0),
        closing=("2024-01-01", 1600.0),
        cashflow=[("2023-07-01", -500.0, "Deposit")],
    )


@pytest.fixture
def degenerate_secant():
    # f(x) = -1000 - 3000x + 2000x^2, so f(0.5) == f(1.0) == -2000
    return make_schedule(
        "assets:ira:FXAIX",
        opening=("2021-01-01", -1000.0),
        closing=("2023-01-01", 2000.0),
        cashflow=[("2022-01-01", -3000.0, "Contribution")],
    )
