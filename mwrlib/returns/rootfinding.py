"""Root-finding for the NPV-zero polynomial (secant with a Brent fallback)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

import logging

from .errors import (
    BracketSameSignError,
    DegenerateSecantError,
    Diagnostic,
    EmptyPolynomialError,
    MaxIterationsExceededError,
    NoBracketFoundError,
    NotARealNumberError,
)
from .polynomial import Polynomial

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RootResult:
    root: float
    iterations: int
    method: str
    diagnostics: Tuple[Diagnostic, ...] = ()

    @property
    def verified(self) -> bool:
        """False when the root failed the |f(root)| sanity check."""
        return Diagnostic.UNVERIFIED_ROOT not in self.diagnostics


def secant(
    poly: Polynomial,
    p0: float = 0.5,
    p1: float = 1.0,
    *,
    precision: float = 1e-6,
    max_iterations: int = 100,
    root_tolerance: float | None = None,
) -> RootResult | None:
    """Secant iteration from the two starting points p0 and p1.

    Returns None when ``max_iterations`` pass without convergence.

    Raises
    ------
    NotARealNumberError
        If the polynomial, or the secant update, is not finite.
    DegenerateSecantError
        If two successive evaluations are equal.
    """
    q0 = poly.evaluate(p0)
    q1 = poly.evaluate(p1)
    if not (math.isfinite(q0) and math.isfinite(q1)):
        raise NotARealNumberError(
            f"Secant start is not a real number: f({p0})={q0}, f({p1})={q1}",
            p0=p0, p1=p1, q0=q0, q1=q1,
        )

    for iteration in range(1, max_iterations + 1):
        if q1 - q0 == 0:
            raise DegenerateSecantError(
                f"Secant division by zero with p0={p0:.6f}, p1={p1:.6f}, q0=q1={q1:.6e}",
                p0=p0, p1=p1, q=q1,
            )

        p = (q1 * p0 - p1 * q0) / (q1 - q0)
        if not math.isfinite(p):
            raise NotARealNumberError(
                f"Secant update is not a real number with p0={p0}, p1={p1}, q0={q0}, q1={q1}",
                p0=p0, p1=p1, q0=q0, q1=q1, p=p,
            )

        p0, q0 = p1, q1
        q1 = poly.evaluate(p)
        logger.debug("Secant iter %s: x=%s value=%s", iteration, p, q1)
        if not math.isfinite(q1):
            raise NotARealNumberError(
                f"Polynomial is not a real number at x={p}", p=p, q=q1
            )

        if q1 == 0 or abs(p - p1) <= precision:
            diagnostics: Tuple[Diagnostic, ...] = ()
            if not poly.is_root(p, root_tolerance):
                logger.warning("Secant converged towards %s but it does not appear to be a root", p)
                diagnostics = (Diagnostic.UNVERIFIED_ROOT,)
            return RootResult(p, iteration, "secant", diagnostics)

        p1 = p

    logger.debug("Secant did not converge within %s iterations", max_iterations)
    return None


def find_bracket(poly: Polynomial, max_points: int = 1000) -> Tuple[float, float]:
    """Probe the polynomial until it has both a negative and a positive witness.

    Probes are ``i`` and ``-1 + 10 / (i + 9)`` for ``i = 1 .. max_points``;
    the second sequence sweeps (-1, 0]. Witnesses recorded before the call
    (e.g. during the secant phase) count.

    Returns
    -------
    (negative_point, positive_point)
    """
    i = 1
    while not poly.has_bracket and i <= max_points:
        poly.evaluate(float(i))
        poly.evaluate(-1.0 + 10.0 / (i + 9.0))
        i += 1

    if not poly.has_bracket:
        raise NoBracketFoundError(
            f"Failed to find a point where the polynomial is >0 and one where it is <0 "
            f"after {max_points} probes",
            positive_point=poly.positive_point,
            negative_point=poly.negative_point,
        )
    logger.debug(
        "Bracket found after %s probes: negative at %s, positive at %s",
        i - 1, poly.negative_point, poly.positive_point,
    )
    return poly.negative_point, poly.positive_point


def _check_real(name: str, point: float, value: float) -> None:
    if not math.isfinite(value):
        raise NotARealNumberError(
            f"Polynomial is not a real number at {name}={point} in brent",
            point=point, value=value,
        )


def brent(
    poly: Polynomial,
    a: float,
    b: float,
    *,
    precision: float = 1e-6,
    max_iterations: int = 100,
    root_tolerance: float | None = None,
    strict_bracket: bool = False,
) -> RootResult:
    """Brent's method on the interval between a and b.

    Raises
    ------
    EmptyPolynomialError
        If the polynomial has no terms.
    NotARealNumberError
        If any tracked point evaluates to nan or infinity.
    BracketSameSignError
        If ``strict_bracket`` is set and f(a), f(b) share a sign.
    MaxIterationsExceededError
        If the bracket is not narrowed to ``precision`` in time.
    """
    if len(poly) == 0:
        raise EmptyPolynomialError("Cannot find the root of an empty polynomial")

    f_a = poly.evaluate(a)
    f_b = poly.evaluate(b)
    if not (math.isfinite(f_a) and math.isfinite(f_b)):
        raise NotARealNumberError(
            f"Polynomial is not defined on interval [a={a}, b={b}] in brent",
            a=a, b=b, f_a=f_a, f_b=f_b,
        )

    if f_a == 0:
        return RootResult(a, 0, "brent")
    if f_b == 0:
        return RootResult(b, 0, "brent")

    diagnostics: List[Diagnostic] = []
    if f_a * f_b > 0:
        message = (
            f"Polynomial does not have opposite signs at a={a} and b={b}: "
            f"f(a)={f_a:.6e}, f(b)={f_b:.6e}"
        )
        if strict_bracket:
            raise BracketSameSignError(message, a=a, b=b, f_a=f_a, f_b=f_b)
        logger.warning("%s; continuing", message)
        diagnostics.append(Diagnostic.BRACKET_SAME_SIGN)

    if abs(f_a) < abs(f_b):
        a, f_a, b, f_b = b, f_b, a, f_a

    c, f_c = a, f_a
    d = c
    mflag = True
    iterations = 0

    while f_b != 0 and abs(b - a) > precision:
        if iterations >= max_iterations:
            raise MaxIterationsExceededError(
                f"Reached maximum iterations {iterations} without getting close enough "
                f"to the root: a={a}, b={b}",
                iterations=iterations, a=a, b=b, f_a=f_a, f_b=f_b,
            )

        if iterations:
            f_a = poly.evaluate(a)
            f_b = poly.evaluate(b)
            f_c = poly.evaluate(c)
            _check_real("a", a, f_a)
            _check_real("b", b, f_b)
            _check_real("c", c, f_c)

        if f_a == f_b:
            raise DegenerateSecantError(
                f"Got the same value for the polynomial at a={a} and b={b}",
                a=a, b=b, value=f_a,
            )
        if f_a != f_c and f_b != f_c:
            # inverse quadratic interpolation
            s = (
                a * f_b * f_c / ((f_a - f_b) * (f_a - f_c))
                + b * f_a * f_c / ((f_b - f_a) * (f_b - f_c))
                + c * f_a * f_b / ((f_c - f_a) * (f_c - f_b))
            )
        else:
            s = b - f_b * (b - a) / (f_b - f_a)

        lower, upper = sorted(((3 * a + b) / 4, b))
        if (
            not lower <= s <= upper
            or (mflag and abs(s - b) >= abs(b - c) / 2)
            or (not mflag and abs(s - b) >= abs(c - d) / 2)
            or (mflag and abs(b - c) < precision)
            or (not mflag and abs(c - d) < precision)
        ):
            s = (a + b) / 2
            mflag = True
        else:
            mflag = False

        f_s = poly.evaluate(s)
        _check_real("s", s, f_s)

        d = c
        c, f_c = b, f_b
        if f_a * f_s <= 0:
            b, f_b = s, f_s
        else:
            a, f_a = s, f_s

        if abs(f_a) < abs(f_b):
            a, f_a, b, f_b = b, f_b, a, f_a

        iterations += 1
        logger.debug("Brent iter %s: a=%s b=%s f(b)=%s", iterations, a, b, f_b)

    if not poly.is_root(b, root_tolerance):
        logger.warning("Brent converged towards %s but it does not appear to be a root", b)
        diagnostics.append(Diagnostic.UNVERIFIED_ROOT)
    return RootResult(b, iterations, "brent", tuple(diagnostics))
