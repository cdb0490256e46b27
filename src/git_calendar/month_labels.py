from __future__ import annotations

import datetime as dt

from .calendar_window import CalendarWindow

MONTH_ABBREVS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def month_start_dates(window: CalendarWindow) -> list[dt.date]:
    """
    First day of each of the 12 months ending with `window.end`'s month.

    Ordered chronologically, not Jan-Dec: if the window ends in March, the
    list runs April, May, ..., February, March.
    """
    out: list[dt.date] = [window.end] * 12
    date = window.end
    for i in range(11, -1, -1):
        date = date.replace(day=1)
        out[i] = date
        date = date - dt.timedelta(days=1)
    return out


def month_starts(window: CalendarWindow) -> list[int]:
    return [window.week_of(d) for d in month_start_dates(window)]


def first_full_month(window: CalendarWindow) -> int:
    # Always the month after end's month (0-based), even when start/end sit on month borders.
    return window.end.month % 12


def layout_month_labels(starts: list[int], first_month: int) -> str:
    """
    Place a 3-letter label for each month at its start column.

    A later label overwrites an earlier one sharing its columns.
    """
    if not starts:
        return ""
    width = max(starts) + 3
    cells = [" "] * width
    month = first_month
    for col in starts:
        name = MONTH_ABBREVS[month]
        cells[col : col + 3] = list(name)
        month = (month + 1) % 12
    return "".join(cells[: starts[-1] + 3])


def format_months(window: CalendarWindow) -> str:
    return layout_month_labels(month_starts(window), first_full_month(window))
