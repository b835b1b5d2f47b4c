"""Selected/today tracking and per-cell highlight classification."""

from __future__ import annotations

import enum

from calendar_logic import CalendarDate, same_date


class CellState(enum.Enum):
    NONE = "none"
    TODAY = "today"
    SELECTED = "selected"


class SelectionState:
    """The externally selected date plus the injected reference "today"."""

    def __init__(self, today: CalendarDate,
                 selected_date: CalendarDate | None = None) -> None:
        self.today = today
        self.selected_date = selected_date

    def select(self, d: CalendarDate) -> None:
        self.selected_date = d

    def is_selected(self, d: CalendarDate) -> bool:
        return same_date(d, self.selected_date)

    def is_today(self, d: CalendarDate) -> bool:
        return same_date(d, self.today)

    def classify(self, d: CalendarDate) -> CellState:
        # Selected styling fully replaces the today marker.
        if self.is_selected(d):
            return CellState.SELECTED
        if self.is_today(d):
            return CellState.TODAY
        return CellState.NONE
