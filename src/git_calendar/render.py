from __future__ import annotations

from .calendar_window import CalendarWindow
from .models import ContributionGrid
from .month_labels import format_months

ROW_LABELS = ("    ", "Mon ", "    ", "Wed ", "    ", "Fri ", "    ")


def glyph_for(count: int) -> str:
    if count <= 0:
        return "."
    if count <= 9:
        return str(count)
    return "X"


def render_rows(window: CalendarWindow, grid: ContributionGrid) -> list[str]:
    rows = [list(label) for label in ROW_LABELS]
    for week, counts in enumerate(grid):
        for weekday in range(7):
            date = window.date_of(week, weekday)
            if window.contains(date):
                rows[weekday].append(glyph_for(counts[weekday]))
            else:
                rows[weekday].append(" ")
    return ["".join(r) for r in rows]


def render_calendar(window: CalendarWindow, grid: ContributionGrid) -> str:
    lines = ["    " + format_months(window)]
    lines.extend(render_rows(window, grid))
    return "\n".join(lines)
