"""Account selection and aggregation of several schedules into one."""

from __future__ import annotations

from typing import Iterable, List, Mapping, Sequence

import logging

from .account import Schedule
from .entry import CLOSING_MEMO, OPENING_MEMO, CashEntry

logger = logging.getLogger(__name__)


def select_accounts(
    schedules: Mapping[str, Schedule] | Iterable[Schedule],
    patterns: Sequence[str] = (),
) -> List[Schedule]:
    """Return the schedules whose account name contains any of ``patterns``.

    Matching is a case-insensitive substring test. With no patterns every
    schedule is selected. The result is sorted by account name.
    """
    items = list(schedules.values()) if isinstance(schedules, Mapping) else list(schedules)
    needles = [p.lower() for p in patterns]
    if needles:
        items = [s for s in items if any(n in s.account.lower() for n in needles)]
    return sorted(items, key=lambda s: s.account)


def merge_schedules(schedules: Iterable[Schedule], account: str = "merged") -> Schedule:
    """Combine several account schedules into a single schedule.

    The opening entry sits at the earliest opening date and sums every
    opening amount; it is absent when no schedule has one. The closing entry
    sits at the latest closing date and sums every closing amount. The
    intermediate cashflows are concatenated.
    """
    schedules = list(schedules)
    if not schedules:
        raise ValueError("Cannot merge an empty selection of accounts")

    opening: CashEntry | None = None
    closing: CashEntry | None = None
    cashflow: List[CashEntry] = []

    for schedule in schedules:
        if schedule.closing is None:
            raise ValueError(f"Account {schedule.account!r} has no closing entry")

        if schedule.opening is not None:
            if opening is None:
                opening = CashEntry(schedule.opening.timestamp, schedule.opening.amount, OPENING_MEMO)
            else:
                opening = CashEntry(
                    min(opening.timestamp, schedule.opening.timestamp),
                    opening.amount + schedule.opening.amount,
                    OPENING_MEMO,
                )

        if closing is None:
            closing = CashEntry(schedule.closing.timestamp, schedule.closing.amount, CLOSING_MEMO)
        else:
            closing = CashEntry(
                max(closing.timestamp, schedule.closing.timestamp),
                closing.amount + schedule.closing.amount,
                CLOSING_MEMO,
            )

        cashflow.extend(schedule.cashflow)

    logger.debug(
        "Merged %d accounts into %s (%d intermediate entries)",
        len(schedules),
        account,
        len(cashflow),
    )
    return Schedule(account=account, closing=closing, opening=opening, cashflow=tuple(cashflow))
