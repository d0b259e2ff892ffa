# tests/utils.py
"""Factories shared across the test suite."""

from __future__ import annotations

from mwrlib.schedule import CLOSING_MEMO, OPENING_MEMO, CashEntry, Schedule


def make_schedule(account, opening=None, closing=None, cashflow=()):
    """Build a schedule from (date, amount) pairs; memo defaults per role."""
    return Schedule(
        account=account,
        opening=CashEntry(opening[0], opening[1], OPENING_MEMO) if opening else None,
        closing=CashEntry(closing[0], closing[1], CLOSING_MEMO) if closing else None,
        cashflow=tuple(CashEntry(d, a, memo) for d, a, memo in cashflow),
    )
