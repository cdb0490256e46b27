from __future__ import annotations

import datetime as dt

from git_calendar.calendar_window import CalendarWindow
from git_calendar.month_labels import (
    MONTH_ABBREVS,
    first_full_month,
    format_months,
    layout_month_labels,
    month_start_dates,
    month_starts,
)


def test_month_start_dates_are_chronological() -> None:
    w = CalendarWindow.from_today(dt.date(2024, 3, 15))
    dates = month_start_dates(w)
    assert dates[0] == dt.date(2023, 4, 1)
    assert dates[-1] == dt.date(2024, 3, 1)
    assert [d.month for d in dates] == [4, 5, 6, 7, 8, 9, 10, 11, 12, 1, 2, 3]


def test_month_starts_cyclic_and_non_decreasing() -> None:
    today = dt.date(2023, 1, 1)
    while today <= dt.date(2024, 12, 31):
        w = CalendarWindow.from_today(today)
        starts = month_starts(w)
        assert len(starts) == 12
        assert starts == sorted(starts)
        assert starts[0] >= 0
        assert starts[-1] < w.num_weeks
        months0 = [d.month - 1 for d in month_start_dates(w)]
        first = first_full_month(w)
        assert months0 == [(first + i) % 12 for i in range(12)]
        assert months0[-1] == today.month - 1
        today += dt.timedelta(days=1)


def test_first_full_month_wraps_after_december() -> None:
    assert first_full_month(CalendarWindow.from_today(dt.date(2023, 12, 31))) == 0
    assert first_full_month(CalendarWindow.from_today(dt.date(2024, 1, 1))) == 1


def test_format_months_aligns_labels_to_start_weeks() -> None:
    w = CalendarWindow.from_today(dt.date(2024, 1, 1))
    header = format_months(w)
    starts = month_starts(w)
    month = first_full_month(w)
    for col in starts:
        assert header[col : col + 3] == MONTH_ABBREVS[month]
        month = (month + 1) % 12
    assert len(header) == starts[-1] + 3
    assert header.startswith("    Feb")
    assert header.endswith("Jan")


def test_layout_month_labels_later_label_wins_on_collision() -> None:
    starts = [0, 4, 4, 12, 17, 21, 26, 30, 34, 39, 43, 47]
    out = layout_month_labels(starts, 0)
    assert out[0:3] == "Jan"
    assert out[4:7] == "Mar"
    assert "Feb" not in out
    assert out.endswith("Dec")
