"""Fixed-size month grids and week strips built from calendar_logic."""

from __future__ import annotations

from dataclasses import dataclass

from calendar_logic import (
    MONDAY,
    CalendarDate,
    days_in_month,
    first_weekday_offset,
    next_month,
    prev_month,
)
from navigator import Viewport

GRID_ROWS = 6
GRID_COLS = 7
GRID_SIZE = GRID_ROWS * GRID_COLS


@dataclass(frozen=True)
class GridCell:
    day_number: int
    belongs_to_viewport_month: bool
    date: CalendarDate


def build_grid(viewport: Viewport) -> list[GridCell]:
    """Return the 42 cells (6×7, Monday first) for the viewport month.

    Leading slots hold the tail of the previous month and trailing slots the
    head of the next one, so the grid is always 6 full rows regardless of
    month length or alignment.
    """
    year, month = viewport.year, viewport.month
    offset = first_weekday_offset(year, month, MONDAY)
    cells: list[GridCell] = []

    if offset:
        py, pm = prev_month(year, month)
        prev_len = days_in_month(py, pm)
        for day in range(prev_len - offset + 1, prev_len + 1):
            cells.append(GridCell(day, False, CalendarDate(py, pm, day)))

    for day in range(1, days_in_month(year, month) + 1):
        cells.append(GridCell(day, True, CalendarDate(year, month, day)))

    ny, nm = next_month(year, month)
    day = 1
    while len(cells) < GRID_SIZE:
        cells.append(GridCell(day, False, CalendarDate(ny, nm, day)))
        day += 1
    return cells


def grid_rows(cells: list[GridCell]) -> list[list[GridCell]]:
    """Split a flat grid into rows of 7."""
    return [cells[i:i + GRID_COLS] for i in range(0, len(cells), GRID_COLS)]


def week_numbers(cells: list[GridCell]) -> list[str]:
    """Return the ISO week number for each row of the grid."""
    return [str(row[0].date.to_date().isocalendar()[1]) for row in grid_rows(cells)]


def week_strip(anchor: CalendarDate) -> list[GridCell]:
    """Return the Monday-first week containing ``anchor``.

    Cells are flagged against the anchor's month, so a week straddling a
    month boundary marks the neighbouring days as outside.
    """
    monday = anchor.add_days(-anchor.weekday)
    cells = []
    for i in range(GRID_COLS):
        d = monday.add_days(i)
        cells.append(GridCell(d.day, (d.year, d.month) == (anchor.year, anchor.month), d))
    return cells
