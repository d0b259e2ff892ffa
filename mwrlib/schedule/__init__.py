"""Account cash histories.

- CashEntry: a dated, signed cash amount
- Schedule: opening/closing balances plus intermediate cashflows
- select_accounts / merge_schedules: pick and combine accounts
"""

from .account import Schedule
from .entry import CLOSING_MEMO, OPENING_MEMO, CashEntry
from .merge import merge_schedules, select_accounts

__all__ = [
    "CashEntry",
    "Schedule",
    "OPENING_MEMO",
    "CLOSING_MEMO",
    "select_accounts",
    "merge_schedules",
]
