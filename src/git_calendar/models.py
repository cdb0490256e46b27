from __future__ import annotations

import dataclasses

# weeks x 7 weekdays, index 0 = Sunday
ContributionGrid = list[list[int]]


@dataclasses.dataclass(frozen=True)
class CommitRecord:
    timestamp: int  # epoch seconds
    author_email: str | None  # None when the raw email was not valid UTF-8


def empty_grid(num_weeks: int) -> ContributionGrid:
    return [[0] * 7 for _ in range(num_weeks)]


def grid_total(grid: ContributionGrid) -> int:
    return sum(sum(week) for week in grid)
