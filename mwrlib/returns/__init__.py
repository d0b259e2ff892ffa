"""Money-weighted returns.

- polynomial: NPV-zero polynomial of a dated cashflow
- rootfinding: secant, bracket discovery and Brent's method
- xirr: orchestration and per-account batches
"""

from .errors import (
    BracketSameSignError,
    DegenerateSecantError,
    Diagnostic,
    EmptyPolynomialError,
    InfiniteIRRError,
    MaxIterationsExceededError,
    NoBracketFoundError,
    NotARealNumberError,
    XIRRError,
)
from .polynomial import Polynomial, build_coefficients, build_polynomial
from .rootfinding import RootResult, brent, find_bracket, secant
from .xirr import XIRRResult, compute_xirr, rate_from_root, xirr_by_account

__all__ = [
    # Main API
    "compute_xirr",
    "xirr_by_account",
    "XIRRResult",
    "rate_from_root",
    # Polynomial
    "Polynomial",
    "build_coefficients",
    "build_polynomial",
    # Solvers
    "RootResult",
    "secant",
    "find_bracket",
    "brent",
    # Errors and diagnostics
    "Diagnostic",
    "XIRRError",
    "NotARealNumberError",
    "DegenerateSecantError",
    "NoBracketFoundError",
    "EmptyPolynomialError",
    "BracketSameSignError",
    "MaxIterationsExceededError",
    "InfiniteIRRError",
]
