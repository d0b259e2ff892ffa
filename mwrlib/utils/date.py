"""Date helpers shared by the schedule model and the ledger loaders."""

from __future__ import annotations

from datetime import date, datetime
from typing import Tuple, Union

from dateutil.relativedelta import relativedelta
from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
LEDGER_FMT = "%Y/%m/%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]

# Start of an "all time" reporting window.
EPOCH = datetime(1900, 1, 1)


def to_date(date_like: DateLike) -> date:
    """
    Convert a string or datetime to a plain date.
    Accepts 'YYYY-MM-DD', 'YYYY/MM/DD' and 'YYYYMMDD' string formats.
    """
    return to_timestamp(date_like).date()


def to_timestamp(date_like: DateLike) -> datetime:
    """
    Convert a date-like value to a datetime.

    Plain dates become midnight datetimes; datetimes (including pandas
    Timestamps) keep their time of day and tzinfo.
    """
    if isinstance(date_like, Timestamp):
        return date_like.to_pydatetime()
    if isinstance(date_like, datetime):
        return date_like
    if isinstance(date_like, date):
        return datetime(date_like.year, date_like.month, date_like.day)
    if isinstance(date_like, str):
        text = date_like.strip()
        for fmt in (DATE_FMT, LEDGER_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def reporting_window(
    period: str | None = None,
    *,
    today: DateLike | None = None,
    all_time: bool = False,
) -> Tuple[datetime, datetime]:
    """Resolve a reporting period to a half-open ``[start, stop)`` window.

    ``period`` may name a year ('2023'), a month ('2023-05') or a single day
    ('2023-05-03'). Without a period the window covers the three months up
    to ``today``. ``all_time`` keeps the stop date and moves the start back
    to 1900-01-01.
    """
    stop = to_timestamp(today) if today is not None else datetime.combine(date.today(), datetime.min.time())

    if period:
        for fmt, step in (
            (DATE_FMT, relativedelta(days=1)),
            ("%Y-%m", relativedelta(months=1)),
            ("%Y", relativedelta(years=1)),
        ):
            try:
                start = datetime.strptime(period.strip(), fmt)
            except ValueError:
                continue
            stop = start + step
            break
        else:
            raise ValueError(f"Unsupported reporting period: {period!r}")
    else:
        start = stop - relativedelta(months=3)

    if all_time:
        start = EPOCH
    return start, stop
