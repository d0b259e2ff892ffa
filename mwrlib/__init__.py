"""Money-weighted rate of return (XIRR) for ledger accounts.

This package computes the annualized money-weighted return of an account's
dated cash history.

Key modules:
- schedule: Account cash histories, account selection and merging
- returns: NPV polynomial, secant/Brent root finding, XIRR orchestration
- data: ledger(1) export parsing and pandas views
- conventions: Day count conventions
- config: Solver configuration
"""

__version__ = "1.0.0"

from mwrlib.config import DEFAULT_CONFIG, SolverConfig
from mwrlib.returns import XIRRError, XIRRResult, compute_xirr, xirr_by_account
from mwrlib.schedule import CashEntry, Schedule

__all__ = [
    "__version__",
    "SolverConfig",
    "DEFAULT_CONFIG",
    "CashEntry",
    "Schedule",
    "compute_xirr",
    "xirr_by_account",
    "XIRRResult",
    "XIRRError",
]
