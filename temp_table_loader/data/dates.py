from __future__ import annotations

import datetime as dt
from typing import List, Union

DateLike = Union[dt.date, str]


def parse_date(value: DateLike) -> dt.date:
    """Accepts a date, a datetime (truncated) or an ISO `YYYY-MM-DD` string."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        try:
            return dt.date.fromisoformat(value.strip())
        except ValueError:
            raise ValueError(f"Not an ISO date (YYYY-MM-DD): {value!r}") from None
    raise ValueError(f"Unsupported date value: {value!r}")


def format_date(day: dt.date) -> str:
    return day.isoformat()


def date_range(start: DateLike, end: DateLike) -> List[dt.date]:
    """
    Every calendar day from start to end, both inclusive, ascending.
    """
    first = parse_date(start)
    last = parse_date(end)
    if last < first:
        raise ValueError(f"End date {format_date(last)} is before start date {format_date(first)}")

    n_days = (last - first).days + 1
    return [first + dt.timedelta(days=i) for i in range(n_days)]
