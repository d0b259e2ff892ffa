"""Day count conventions used to turn entry dates into polynomial exponents."""

from __future__ import annotations

from datetime import timedelta
from typing import Callable, Dict

import logging

from mwrlib.utils.date import DateLike, to_timestamp

logger = logging.getLogger(__name__)

DayCountFunc = Callable[[DateLike, DateLike], float]

_ONE_DAY = timedelta(days=1)


def _elapsed_days(start: DateLike, end: DateLike) -> float:
    """Signed number of days from start to end, fractional for intraday times."""
    delta = to_timestamp(end) - to_timestamp(start)
    return delta / _ONE_DAY


def _act_365f(start: DateLike, end: DateLike) -> float:
    """Return the signed ACT/365F year fraction between two dates.

    Follows the convention:
        yearfrac(d1, d2) = ActualDays(d1, d2) / 365

    Unlike a coupon accrual, the result keeps its sign: an entry booked
    before the reference date gets a negative exponent.
    """
    return _elapsed_days(start, end) / 365.0


def _act_360(start: DateLike, end: DateLike) -> float:
    """Return the signed ACT/360 year fraction between two dates."""
    return _elapsed_days(start, end) / 360.0


# Process-wide; register_day_count is the only writer.
_REGISTRY: Dict[str, DayCountFunc] = {
    "ACT/365F": _act_365f,
    "ACT/365": _act_365f,
    "ACT/360": _act_360,
}


def get_day_count(name: str) -> DayCountFunc:
    """Return a callable implementing the requested day-count convention."""
    key = name.upper()
    try:
        return _REGISTRY[key]
    except KeyError as exc:
        raise ValueError(
            f"Unsupported day count convention: {name}. "
            f"Available: {sorted(_REGISTRY)}"
        ) from exc


def register_day_count(name: str, func: DayCountFunc) -> None:
    """Register a custom day-count convention."""
    key = name.upper()
    if key in _REGISTRY:
        raise ValueError(f"Day count '{name}' already registered")
    logger.debug("Registering day count %s", key)
    _REGISTRY[key] = func


def year_fraction(start: DateLike, end: DateLike, day_count: str = "ACT/365F") -> float:
    """Convenience wrapper: year fraction from start to end under ``day_count``."""
    return get_day_count(day_count)(start, end)


def is_known_day_count(name: str) -> bool:
    return name.upper() in _REGISTRY
