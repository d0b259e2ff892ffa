"""
Loaders for ledger(1) exports.

Turns the text produced by

    ledger balance -e DATE -C -V --flat --no-total ^assets: ...
    ledger register -b START -e STOP -C -B ^assets: ... \\
        --format '%(format_date(date))|%(display_amount)|%(account)|%(payee)\\n'

into per-account schedules. Running ledger itself is left to the caller.
"""

from __future__ import annotations

import csv
import io
from datetime import datetime
from typing import Dict, List, Mapping, Sequence

import logging

import pandas as pd

from mwrlib.schedule import CLOSING_MEMO, OPENING_MEMO, CashEntry, Schedule
from mwrlib.utils.date import DateLike, to_timestamp

logger = logging.getLogger(__name__)

REGISTER_COLUMNS = ["date", "amount", "account", "payee"]


def parse_amount(text: str) -> float:
    """Parse a dollar amount such as '$1,234.56' or '-$12.00'."""
    return float(text.strip().replace("$", "", 1).replace(",", ""))


def parse_balances(text: str) -> Dict[str, float]:
    """Parse ``ledger balance --flat --no-total`` output.

    Each non-empty line holds an amount followed by an account name. Lines
    without an account name are ignored.

    Raises
    ------
    ValueError
        If an amount cannot be parsed.
    """
    balances: Dict[str, float] = {}
    for line in text.splitlines():
        tok = line.strip().split(" ", 1)
        if len(tok) != 2:
            continue
        amount, name = tok[0], tok[1].strip()
        try:
            balances[name] = parse_amount(amount)
        except ValueError as exc:
            raise ValueError(f"Invalid balance amount {amount!r} for {name!r}") from exc
    return balances


def _skip_bad_line(fields: List[str]) -> None:
    logger.warning("Unexpected token count %d in register line: %s", len(fields), "|".join(fields))
    return None


def parse_register(text: str) -> pd.DataFrame:
    """Parse ``date|amount|account|payee`` register output.

    Returns a DataFrame with ``date`` (datetime), ``amount`` (float),
    ``account`` and ``payee`` columns. Rows with a missing field or an
    unparsable date or amount are logged and dropped.
    """
    if not text.strip():
        return pd.DataFrame(columns=REGISTER_COLUMNS)

    df = pd.read_csv(
        io.StringIO(text),
        sep="|",
        header=None,
        names=REGISTER_COLUMNS,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        quoting=csv.QUOTE_NONE,
        engine="python",
        on_bad_lines=_skip_bad_line,
    )
    # short lines are padded with NaN, empty fields stay ""
    short = df["payee"].isna()
    for _, row in df[short].iterrows():
        fields = [value for value in row if isinstance(value, str)]
        _skip_bad_line(fields)
    df = df[~short].fillna("")
    for column in REGISTER_COLUMNS:
        df[column] = df[column].str.strip()

    missing = (df["date"] == "") | (df["amount"] == "") | (df["payee"] == "")
    if missing.any():
        logger.debug("Skipping %d register rows with missing fields", int(missing.sum()))
    df = df[~missing]

    dates = []
    for value in df["date"]:
        try:
            dates.append(to_timestamp(value))
        except ValueError as exc:
            logger.warning("Skipping register row: %s", exc)
            dates.append(pd.NaT)
    df = df.assign(
        date=pd.to_datetime(pd.Series(dates, index=df.index, dtype=object)),
        amount=pd.to_numeric(
            df["amount"].str.replace("$", "", n=1, regex=False).str.replace(",", "", regex=False),
            errors="coerce",
        ),
    )

    bad_amount = df["amount"].isna() & df["date"].notna()
    for raw in df.loc[bad_amount, "payee"]:
        logger.warning("Skipping register row with invalid amount (payee %r)", raw)
    return df.dropna(subset=["date", "amount"]).reset_index(drop=True)


def load_schedules(
    opening_balances: Mapping[str, float],
    closing_balances: Mapping[str, float],
    register: pd.DataFrame,
    start: DateLike,
    stop: DateLike,
    *,
    exclude_payees: Sequence[str] = (),
) -> Dict[str, Schedule]:
    """Assemble per-account schedules from parsed ledger exports.

    Args:
        opening_balances: Balances as of ``start`` (from :func:`parse_balances`)
        closing_balances: Balances as of ``stop``
        register: Transactions within the window (from :func:`parse_register`)
        start: Reporting window start; date of the opening entries
        stop: Reporting window end; date of the closing entries
        exclude_payees: Register rows whose payee contains any of these
            substrings are left out (e.g. dividends reinvested inside a fund)

    Returns:
        Mapping of account name to schedule. Opening balances keep their
        sign, closing balances are negated so that a fully liquidated account
        nets to zero. An account without a closing balance uses its last
        register entry as the closing entry; accounts with neither are
        dropped.
    """
    start_ts: datetime = to_timestamp(start)
    stop_ts: datetime = to_timestamp(stop)

    openings: Dict[str, CashEntry] = {
        name: CashEntry(start_ts, amount, OPENING_MEMO) for name, amount in opening_balances.items()
    }
    closings: Dict[str, CashEntry] = {
        name: CashEntry(stop_ts, -amount, CLOSING_MEMO) for name, amount in closing_balances.items()
    }
    cashflows: Dict[str, List[CashEntry]] = {name: [] for name in [*openings, *closings]}

    for row in register.itertuples(index=False):
        if row.account not in cashflows:
            continue
        if any(s in row.payee for s in exclude_payees):
            logger.debug("Excluding %s %s %s", row.account, row.date, row.payee)
            continue
        cashflows[row.account].append(CashEntry(row.date, row.amount, row.payee))

    schedules: Dict[str, Schedule] = {}
    for name, flows in cashflows.items():
        closing = closings.get(name)
        if closing is None:
            if not flows:
                logger.debug("Dropping %s: no closing balance and no cashflow", name)
                continue
            closing = flows.pop()
        schedules[name] = Schedule(
            account=name,
            closing=closing,
            opening=openings.get(name),
            cashflow=tuple(flows),
        )
    return schedules
