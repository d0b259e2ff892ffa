"""
Data loading and tabular views.

Parses ledger(1) exports into schedules and flattens schedules and results
into pandas DataFrames.
"""

from .frames import entries_frame, results_frame
from .ledger import load_schedules, parse_amount, parse_balances, parse_register

__all__ = [
    # Ledger exports
    "parse_amount",
    "parse_balances",
    "parse_register",
    "load_schedules",
    # Frames
    "entries_frame",
    "results_frame",
]
