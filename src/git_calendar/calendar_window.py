from __future__ import annotations

import dataclasses
import datetime as dt


def one_year_ago(date: dt.date) -> dt.date:
    """
    Rewind a date by one calendar year.

    Feb 29 has no counterpart in a non-leap year and maps to Feb 28.
    """
    try:
        return date.replace(year=date.year - 1)
    except ValueError:
        return dt.date(date.year - 1, 2, 28)


def days_since_sunday(date: dt.date) -> int:
    return date.isoweekday() % 7


def first_sunday_on_or_before(date: dt.date) -> dt.date:
    return date - dt.timedelta(days=days_since_sunday(date))


@dataclasses.dataclass(frozen=True)
class CalendarWindow:
    start: dt.date  # inclusive
    end: dt.date  # inclusive
    initial_sunday: dt.date  # origin for week numbering, <= start

    def __post_init__(self) -> None:
        if not (self.initial_sunday <= self.start <= self.end):
            raise ValueError(
                f"Invalid window: initial_sunday={self.initial_sunday} start={self.start} end={self.end}"
            )
        if days_since_sunday(self.initial_sunday) != 0:
            raise ValueError(f"initial_sunday is not a Sunday: {self.initial_sunday}")

    @classmethod
    def from_today(cls, today: dt.date | None = None) -> CalendarWindow:
        """The year leading up to and including `today`."""
        if today is None:
            today = dt.date.today()
        start = one_year_ago(today) + dt.timedelta(days=1)
        return cls(start=start, end=today, initial_sunday=first_sunday_on_or_before(start))

    def contains(self, date: dt.date) -> bool:
        return self.start <= date <= self.end

    def week_of(self, date: dt.date) -> int:
        """Zero-based week number counted from `initial_sunday`."""
        return (date - self.initial_sunday).days // 7

    def date_of(self, week: int, weekday: int) -> dt.date:
        return self.initial_sunday + dt.timedelta(weeks=week, days=weekday)

    @property
    def num_weeks(self) -> int:
        # Partial weeks at either end count; yields 52, 53 or 54.
        return self.week_of(self.end) + 1


def weekday_of(date: dt.date) -> int:
    """Sunday = 0 .. Saturday = 6."""
    return days_since_sunday(date)


def num_weeks(window: CalendarWindow) -> int:
    return window.num_weeks
