"""Tabular views of schedules and XIRR outcomes for downstream reporting."""

from __future__ import annotations

from typing import Mapping, Union

import pandas as pd

from mwrlib.conventions.daycount import get_day_count
from mwrlib.returns.errors import XIRRError
from mwrlib.returns.xirr import XIRRResult
from mwrlib.schedule import Schedule

ENTRY_COLUMNS = ["timestamp", "amount", "memo", "year_fraction"]
RESULT_COLUMNS = ["account", "rate", "method", "iterations", "verified", "diagnostics", "error"]


def entries_frame(schedule: Schedule, day_count: str = "ACT/365F") -> pd.DataFrame:
    """Return the filtered, sorted cashflow of ``schedule`` as a DataFrame.

    ``year_fraction`` is the polynomial exponent of each entry, measured from
    the schedule's reference start.
    """
    dc_func = get_day_count(day_count)
    reference = schedule.reference_start()
    rows = [
        (entry.timestamp, entry.amount, entry.memo, dc_func(reference, entry.timestamp))
        for entry in schedule.entries()
    ]
    return pd.DataFrame(rows, columns=ENTRY_COLUMNS)


def results_frame(results: Mapping[str, Union[XIRRResult, XIRRError]]) -> pd.DataFrame:
    """Flatten the output of :func:`xirr_by_account` into one row per account."""
    rows = []
    for account, outcome in results.items():
        if isinstance(outcome, XIRRError):
            rows.append(
                {
                    "account": account,
                    "rate": getattr(outcome, "rate", float("nan")),
                    "method": None,
                    "iterations": None,
                    "verified": False,
                    "diagnostics": "",
                    "error": f"{type(outcome).__name__}: {outcome}",
                }
            )
            continue
        rows.append(
            {
                "account": account,
                "rate": outcome.rate,
                "method": outcome.method,
                "iterations": outcome.root.iterations if outcome.root is not None else 0,
                "verified": outcome.verified,
                "diagnostics": ",".join(d.value for d in outcome.diagnostics),
                "error": None,
            }
        )
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
