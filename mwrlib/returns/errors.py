"""Errors and diagnostics raised by the XIRR solver."""

from __future__ import annotations

from enum import Enum
from typing import Any


class Diagnostic(Enum):
    """Non-fatal findings attached to a returned root."""

    # Converged, but |f(root)| is not below the sanity tolerance.
    UNVERIFIED_ROOT = "UNVERIFIED_ROOT"
    # Brent was started from endpoints that do not straddle zero.
    BRACKET_SAME_SIGN = "BRACKET_SAME_SIGN"


class XIRRError(RuntimeError):
    """Base class for XIRR failures.

    ``context`` holds the points and values needed to reproduce the failure.
    """

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.context = context


class NotARealNumberError(XIRRError):
    """Raised when the polynomial evaluates to nan or infinity."""


class DegenerateSecantError(XIRRError):
    """Raised when an interpolation step would divide by zero."""


class NoBracketFoundError(XIRRError):
    """Raised when no positive/negative witness pair was found."""


class EmptyPolynomialError(XIRRError):
    """Raised when Brent's method is run on a polynomial with no terms."""


class BracketSameSignError(XIRRError):
    """Raised in strict mode when Brent's endpoints share a sign."""


class MaxIterationsExceededError(XIRRError):
    """Raised when Brent's method hits its iteration cap."""


class InfiniteIRRError(XIRRError):
    """Raised when the discount-factor root is exactly zero."""

    rate = 0.0
