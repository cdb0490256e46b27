from __future__ import annotations

import datetime as dt
from typing import Iterable

from .calendar_window import CalendarWindow, weekday_of
from .errors import DataIntegrityError
from .models import CommitRecord, ContributionGrid, empty_grid

ALL_AUTHORS = "*"


def commit_date_utc(timestamp: int) -> dt.date:
    return dt.datetime.fromtimestamp(timestamp, tz=dt.timezone.utc).date()


def email_matches(email_filter: str, author_email: str) -> bool:
    return email_filter == ALL_AUTHORS or author_email == email_filter


def tally_contributions(
    window: CalendarWindow,
    email: str,
    commits: Iterable[CommitRecord],
) -> ContributionGrid:
    """
    Count commits per (week, weekday) cell of `window`.

    `commits` must be ordered newest first (non-increasing timestamps). The
    stream is abandoned at the first record dated before `window.start`, so
    out-of-order input is silently undercounted.
    """
    grid = empty_grid(window.num_weeks)

    for commit in commits:
        date = commit_date_utc(commit.timestamp)
        if date < window.start:
            break

        if commit.author_email is None:
            raise DataIntegrityError(f"commit email is not valid UTF-8 (timestamp {commit.timestamp})")
        if not email_matches(email, commit.author_email):
            continue

        week = window.week_of(date)
        if week >= len(grid):
            # future-dated commit, outside the drawn weeks
            continue
        grid[week][weekday_of(date)] += 1

    return grid
