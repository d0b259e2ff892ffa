# tests/test_conventions.py
from datetime import date, datetime

import pandas as pd
import pytest

from mwrlib.conventions import daycount
from mwrlib.conventions.daycount import get_day_count, register_day_count, year_fraction
from mwrlib.utils.date import EPOCH, reporting_window, to_date, to_timestamp


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2023-05-03", datetime(2023, 5, 3)),
        ("2023/05/03", datetime(2023, 5, 3)),
        ("20230503", datetime(2023, 5, 3)),
        (date(2023, 5, 3), datetime(2023, 5, 3)),
        (datetime(2023, 5, 3, 9, 30), datetime(2023, 5, 3, 9, 30)),
        (pd.Timestamp("2023-05-03 09:30"), datetime(2023, 5, 3, 9, 30)),
    ],
)
def test_to_timestamp(value, expected):
    assert to_timestamp(value) == expected


def test_to_timestamp_rejects_unknown_input():
    with pytest.raises(ValueError):
        to_timestamp("03.05.2023")
    with pytest.raises(TypeError):
        to_timestamp(20230503)


def test_to_date():
    assert to_date("2023/05/03") == date(2023, 5, 3)
    assert to_date(datetime(2023, 5, 3, 23, 59)) == date(2023, 5, 3)


@pytest.mark.parametrize(
    "period, expected",
    [
        ("2023", (datetime(2023, 1, 1), datetime(2024, 1, 1))),
        ("2023-02", (datetime(2023, 2, 1), datetime(2023, 3, 1))),
        ("2023-02-28", (datetime(2023, 2, 28), datetime(2023, 3, 1))),
    ],
)
def test_reporting_window_periods(period, expected):
    assert reporting_window(period) == expected


def test_reporting_window_defaults_to_last_three_months():
    assert reporting_window(today="2024-05-31") == (datetime(2024, 2, 29), datetime(2024, 5, 31))


def test_reporting_window_all_time():
    assert reporting_window("2023", all_time=True) == (EPOCH, datetime(2024, 1, 1))
    start, stop = reporting_window(today="2024-05-31", all_time=True)
    assert start == datetime(1900, 1, 1)
    assert stop == datetime(2024, 5, 31)


def test_reporting_window_rejects_bad_period():
    with pytest.raises(ValueError, match="reporting period"):
        reporting_window("May 2023")


def test_act_365f_is_signed_and_fractional():
    assert year_fraction("2023-01-01", "2024-01-01") == 1.0
    assert year_fraction("2024-01-01", "2023-01-01") == -1.0
    assert year_fraction("2024-01-01", "2025-01-01") == pytest.approx(366 / 365.0)
    assert year_fraction(datetime(2023, 1, 1), datetime(2023, 1, 1, 12)) == pytest.approx(0.5 / 365.0)


def test_act_360_and_lookup():
    assert get_day_count("act/360")("2023-01-01", "2023-07-20") == pytest.approx(200 / 360.0)
    assert get_day_count("ACT/365") is get_day_count("ACT/365F")
    with pytest.raises(ValueError, match="Available"):
        get_day_count("30/360")


def test_register_day_count(monkeypatch):
    monkeypatch.setattr(daycount, "_REGISTRY", dict(daycount._REGISTRY))
    register_day_count("ACT/366", lambda start, end: daycount._elapsed_days(start, end) / 366.0)
    assert year_fraction("2024-01-01", "2025-01-01", "ACT/366") == 1.0
    with pytest.raises(ValueError, match="already registered"):
        register_day_count("act/366", lambda start, end: 0.0)
