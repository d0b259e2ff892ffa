"""Single dated cash movement of an account."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from mwrlib.utils.date import to_timestamp

OPENING_MEMO = "Opening Balance"
CLOSING_MEMO = "Closing Balance"


@dataclass(frozen=True)
class CashEntry:
    """A signed cash amount booked at a point in time.

    Attributes:
        timestamp: When the amount was booked. Dates, ISO strings and pandas
            Timestamps are normalized to ``datetime`` on construction.
        amount: Signed amount. Zero-amount intermediate entries are ignored
            by the return computation.
        memo: Free text carried along for reporting (ledger payee).
    """

    timestamp: datetime
    amount: float
    memo: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", to_timestamp(self.timestamp))
        object.__setattr__(self, "amount", float(self.amount))
