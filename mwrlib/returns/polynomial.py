"""NPV-zero polynomial in the discount factor.

A dated cashflow ``(t_i, c_i)`` becomes ``f(x) = sum_i c_i * x ** e_i`` with
``e_i`` the year fraction from the reference start to ``t_i``. A root ``x``
of ``f`` is the discount factor ``1 / (1 + rate)``.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Dict, Iterable, Mapping

import logging

import numpy as np

from mwrlib.conventions.daycount import get_day_count
from mwrlib.schedule.entry import CashEntry

logger = logging.getLogger(__name__)


class Polynomial:
    """Sparse polynomial with real (possibly fractional) exponents.

    Besides evaluating, the instance remembers the first point at which it
    evaluated strictly positive and the first at which it evaluated strictly
    negative. These witnesses seed the bracket for Brent's method and are
    never overwritten; a new computation needs a new instance.
    """

    def __init__(self, coefficients: Mapping[float, float], root_tolerance: float = 1.0):
        self._coefficients: Dict[float, float] = dict(coefficients)
        self._exponents = np.fromiter(self._coefficients.keys(), dtype=float, count=len(self._coefficients))
        self._values = np.fromiter(self._coefficients.values(), dtype=float, count=len(self._coefficients))
        self.root_tolerance = root_tolerance

        self.positive_point: float | None = None
        self.negative_point: float | None = None
        self.evaluations = 0

    def __len__(self) -> int:
        return len(self._coefficients)

    def __repr__(self) -> str:
        terms = " + ".join(f"{c:g}*x^{e:.6g}" for e, c in sorted(self._coefficients.items()))
        return f"Polynomial({terms or '0'})"

    @property
    def coefficients(self) -> Dict[float, float]:
        return dict(self._coefficients)

    @property
    def has_bracket(self) -> bool:
        """True once both a positive and a negative witness are known."""
        return self.positive_point is not None and self.negative_point is not None

    def evaluate(self, x: float) -> float:
        """Return f(x); nan or infinity when f is undefined at x.

        Negative x with a fractional exponent, 0 with a negative exponent and
        overflow all yield a non-finite result instead of raising.
        """
        self.evaluations += 1
        with np.errstate(all="ignore"):
            value = float(np.sum(self._values * np.power(float(x), self._exponents)))

        if math.isfinite(value):
            if self.positive_point is None and value > 0:
                self.positive_point = x
            elif self.negative_point is None and value < 0:
                self.negative_point = x
        return value

    def is_root(self, x: float, tolerance: float | None = None) -> bool:
        """Sanity check that |f(x)| is below ``tolerance`` (default: root_tolerance)."""
        tol = self.root_tolerance if tolerance is None else tolerance
        return abs(self.evaluate(x)) < tol


def build_coefficients(
    entries: Iterable[CashEntry],
    reference_start: datetime,
    day_count: str = "ACT/365F",
) -> Dict[float, float]:
    """Sum entry amounts by year-fraction exponent, dropping zero sums."""
    dc_func = get_day_count(day_count)
    coefficients: Dict[float, float] = {}
    for entry in entries:
        exponent = dc_func(reference_start, entry.timestamp)
        coefficients[exponent] = coefficients.get(exponent, 0.0) + entry.amount

    for exponent in [e for e, c in coefficients.items() if c == 0]:
        logger.debug("Dropping cancelled bucket at exponent %s", exponent)
        del coefficients[exponent]
    return coefficients


def build_polynomial(
    entries: Iterable[CashEntry],
    reference_start: datetime,
    *,
    day_count: str = "ACT/365F",
    root_tolerance: float = 1.0,
) -> Polynomial:
    """Build the NPV-zero polynomial of an ordered cashflow."""
    return Polynomial(build_coefficients(entries, reference_start, day_count), root_tolerance)
