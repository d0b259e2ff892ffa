"""Account cash history and its flattening into an ordered cashflow."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Tuple

from .entry import CashEntry


@dataclass(frozen=True)
class Schedule:
    """Full cash history of one account over a reporting window.

    Attributes:
        account: Account name (ledger account path).
        closing: Closing balance entry. Must be present before any return
            is computed.
        opening: Optional opening balance entry.
        cashflow: Intermediate contributions and withdrawals, in booking
            order. Not required to be sorted.
    """

    account: str
    closing: CashEntry | None = None
    opening: CashEntry | None = None
    cashflow: Tuple[CashEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cashflow", tuple(self.cashflow))

    def entries(self) -> List[CashEntry]:
        """Return the time-sorted cashflow used for the return computation.

        The opening entry (if any) and the closing entry are always kept.
        Intermediate entries with a zero amount, or booked strictly after the
        closing entry, are dropped. Entries sharing a timestamp keep their
        booking order.
        """
        closing = self._require_closing()

        arr: List[CashEntry] = []
        if self.opening is not None:
            arr.append(self.opening)
        for entry in self.cashflow:
            if entry.timestamp > closing.timestamp:
                continue
            if entry.amount == 0:
                continue
            arr.append(entry)
        arr.append(closing)
        arr.sort(key=lambda e: e.timestamp)
        return arr

    def reference_start(self) -> datetime:
        """Date the polynomial exponents are measured from.

        The opening entry if there is one, else the earliest intermediate
        entry, else the closing entry.
        """
        if self.opening is not None:
            return self.opening.timestamp
        if self.cashflow:
            return min(entry.timestamp for entry in self.cashflow)
        return self._require_closing().timestamp

    def _require_closing(self) -> CashEntry:
        if self.closing is None:
            raise ValueError(f"Account {self.account!r} has no closing entry")
        return self.closing
